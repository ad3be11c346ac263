"""JSON API: GET lists items, POST adds one."""

import threading

from fsrouter import Response

_items: list[dict] = []
_lock = threading.Lock()


def get(request):
    limit = int(request.query.get("limit", "50"))
    with _lock:
        return {"items": _items[:limit], "total": len(_items)}


async def post(request):
    data = await request.json()
    if not isinstance(data, dict) or not data.get("title"):
        return Response.json({"error": "title is required"}, status=400)
    with _lock:
        item = {"id": len(_items) + 1, "title": data["title"]}
        _items.append(item)
    return item, 201, {"Location": f"/api/items/{item['id']}"}
