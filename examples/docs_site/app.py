"""Docs site — routes straight from the ``pages`` directory.

Shows every kind of route file: Python handlers (``handler`` or
per-method functions), plain HTML, Markdown with front matter, dynamic
``[id]`` segments and a ``[...path]`` catch-all. Unmatched paths get a
custom 404 page.

Run:
    cd examples/docs_site && python app.py
"""

from pathlib import Path

from fsrouter import FsRouter, RouterConfig


def not_found(request):
    return f"<h1>Nothing at {request.path}</h1><p><a href=\"/\">Back home</a></p>"


app = FsRouter(
    Path(__file__).parent / "pages",
    RouterConfig(debug=True),
    not_found=not_found,
)

if __name__ == "__main__":
    app.run()
