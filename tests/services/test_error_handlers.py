"""Error Handlers — framework errors and crashes still answer with the envelope."""

import json

from starlette.requests import Request

from users_api.api.error_handlers import generic_error_handler


async def test_unknown_route_uses_envelope(client):
    res = await client.get("/1/extra")
    assert res.status_code == 404
    assert res.json() == {"status": "fail", "message": "Not Found"}


async def test_wrong_method_uses_envelope(client):
    res = await client.patch("/1", json={})
    assert res.status_code == 405
    assert res.json() == {"status": "fail", "message": "Method Not Allowed"}


async def test_generic_handler_hides_details():
    request = Request({
        "type": "http", "method": "GET", "path": "/boom",
        "headers": [], "query_string": b"",
    })
    res = await generic_error_handler(request, RuntimeError("secret detail"))
    assert res.status_code == 500
    body = json.loads(res.body)
    assert body == {"status": "fail", "message": "internal server error"}
