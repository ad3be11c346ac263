import json
from html import escape
from pathlib import Path

from fsrouter import create_route

POSTS = json.loads((Path(__file__).parents[2] / "posts.json").read_text())


@create_route
def handler(request):
    items = "".join(
        f'<li><a href="/blog/{post["id"]}">{escape(post["title"])}</a></li>'
        for post in POSTS.values()
    )
    return f"<h1>Blog</h1><ul>{items}</ul>"
