import httpx
from fastapi.testclient import TestClient

from todolist.proxy import server
from todolist.render_api.sdk import SDK

SERVICES = [
    {"cursor": "WNZm", "service": {"id": "srv-cuggl2bqf0us739p3b8g", "name": "ToDoListServer", "type": "web_service"}},
    {"cursor": "fdjv", "service": {"id": "srv-cufujmtsvqrc73fu33og", "name": "ToDoListClient", "type": "static_site"}},
]


def _app_with(handler, monkeypatch, api_key="rnd_test"):
    monkeypatch.setenv("RENDER_API_KEY", api_key)
    return server.create_app(sdk=SDK(transport=httpx.MockTransport(handler)))


def test_root_returns_services_json(monkeypatch):
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json=SERVICES)

    with TestClient(_app_with(handler, monkeypatch)) as client:
        r = client.get("/")

    assert r.status_code == 200
    assert r.headers["content-type"].startswith("application/json")
    assert r.json() == SERVICES
    (req,) = seen
    assert req.url.path == "/v1/services"
    assert req.url.params["includePreviews"] == "true"
    assert req.url.params["limit"] == "20"
    assert req.headers["Authorization"] == "Bearer rnd_test"


def test_upstream_error_becomes_plain_500(monkeypatch):
    def handler(request):
        return httpx.Response(401, json={"message": "unauthorized"})

    with TestClient(_app_with(handler, monkeypatch)) as client:
        r = client.get("/")

    assert r.status_code == 500
    assert r.headers["content-type"].startswith("text/plain")
    assert r.text == "Error fetching services"


def test_network_failure_becomes_plain_500(monkeypatch):
    def handler(request):
        raise httpx.ConnectError("no route to host", request=request)

    with TestClient(_app_with(handler, monkeypatch)) as client:
        r = client.get("/")

    assert r.status_code == 500
    assert r.text == "Error fetching services"


def test_render_api_url_override(monkeypatch):
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json=[])

    monkeypatch.setenv("RENDER_API_URL", "http://render.local/v1")
    with TestClient(_app_with(handler, monkeypatch)) as client:
        assert client.get("/").json() == []
        assert client.get("/health").json() == {"status": "ok"}

    assert str(seen[0].url).startswith("http://render.local/v1/services")
