import asyncio
import base64
import inspect
import json

import httpx
import pytest

from todolist.render_api.core import APICore, FetchError
from todolist.render_api.sdk import SDK, USER_AGENT


class Recorder:
    """MockTransport handler that records requests and replays one response."""

    def __init__(self, response: httpx.Response):
        self.response = response
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.response


def _sdk(response: httpx.Response):
    rec = Recorder(response)
    return SDK(transport=httpx.MockTransport(rec)), rec


def test_list_services_sends_query_and_bearer_token():
    sdk, rec = _sdk(httpx.Response(200, json=[{"cursor": "c1", "service": {"id": "srv-1"}}]))
    sdk.auth("rnd_secret")

    res = asyncio.run(sdk.list_services({"includePreviews": "true", "limit": "20"}))

    assert res.status == 200
    assert res.data == [{"cursor": "c1", "service": {"id": "srv-1"}}]
    (req,) = rec.requests
    assert req.method == "GET"
    assert req.url.host == "api.render.com"
    assert req.url.path == "/v1/services"
    assert req.url.params["includePreviews"] == "true"
    assert req.url.params["limit"] == "20"
    assert req.headers["Authorization"] == "Bearer rnd_secret"
    assert req.headers["User-Agent"] == USER_AGENT


def test_path_parameters_are_filled_and_rest_goes_to_query():
    sdk, rec = _sdk(httpx.Response(200, json={"id": "dep-1"}))
    asyncio.run(sdk.retrieve_deploy({"serviceId": "srv-1", "deployId": "dep-1", "extra": "x"}))
    (req,) = rec.requests
    assert req.url.path == "/v1/services/srv-1/deploys/dep-1"
    assert dict(req.url.params) == {"extra": "x"}


def test_path_parameters_are_quoted():
    sdk, rec = _sdk(httpx.Response(200, json={}))
    asyncio.run(sdk.retrieve_env_var({"serviceId": "srv-1", "envVarKey": "A B/C"}))
    (req,) = rec.requests
    assert req.url.raw_path.startswith(b"/v1/services/srv-1/env-vars/A%20B%2FC")


def test_list_metadata_repeats_the_key():
    sdk, rec = _sdk(httpx.Response(200, json=[]))
    asyncio.run(sdk.list_services({"name": ["a", "b"], "type": None}))
    (req,) = rec.requests
    assert req.url.params.get_list("name") == ["a", "b"]
    assert "type" not in req.url.params


def test_missing_path_parameter_raises_before_sending():
    sdk, rec = _sdk(httpx.Response(200, json={}))
    with pytest.raises(ValueError, match="serviceId"):
        asyncio.run(sdk.retrieve_service({}))
    assert rec.requests == []


def test_body_is_sent_as_json():
    sdk, rec = _sdk(httpx.Response(200, json={"id": "srv-1", "name": "renamed"}))
    res = asyncio.run(sdk.update_service({"name": "renamed"}, {"serviceId": "srv-1"}))
    (req,) = rec.requests
    assert req.method == "PATCH"
    assert json.loads(req.read()) == {"name": "renamed"}
    assert res.data["name"] == "renamed"


def test_endpoint_without_arguments():
    sdk, rec = _sdk(httpx.Response(200, json={"email": "me@example.com"}))
    res = asyncio.run(sdk.get_user())
    assert rec.requests[0].url.path == "/v1/users"
    assert res.data["email"] == "me@example.com"


def test_empty_response_body_is_none():
    sdk, rec = _sdk(httpx.Response(204))
    res = asyncio.run(sdk.delete_service({"serviceId": "srv-1"}))
    assert rec.requests[0].method == "DELETE"
    assert res.status == 204
    assert res.data is None


def test_error_status_raises_fetch_error_with_payload():
    sdk, _ = _sdk(httpx.Response(401, json={"message": "unauthorized"}))
    with pytest.raises(FetchError) as exc_info:
        asyncio.run(sdk.list_services())
    assert exc_info.value.status == 401
    assert exc_info.value.data == {"message": "unauthorized"}


def test_non_json_error_body_is_text():
    sdk, _ = _sdk(httpx.Response(503, text="unavailable", headers={"content-type": "text/plain"}))
    with pytest.raises(FetchError) as exc_info:
        asyncio.run(sdk.list_owners())
    assert exc_info.value.data == "unavailable"


def test_basic_auth_with_two_values():
    sdk, rec = _sdk(httpx.Response(200, json=[]))
    assert sdk.auth("user", "pass") is sdk
    asyncio.run(sdk.list_owners())
    expected = "Basic " + base64.b64encode(b"user:pass").decode()
    assert rec.requests[0].headers["Authorization"] == expected


def test_auth_rejects_bad_arity():
    with pytest.raises(ValueError):
        SDK().auth()
    with pytest.raises(ValueError):
        SDK().auth("a", "b", "c")


def test_server_variables_are_substituted():
    sdk, rec = _sdk(httpx.Response(200, json=[]))
    sdk.server("https://{region}.example.com/{basePath}", {"region": "eu", "basePath": "v14"})
    asyncio.run(sdk.list_disks())
    assert str(rec.requests[0].url) == "https://eu.example.com/v14/disks"


def test_config_timeout_is_milliseconds():
    core = APICore("ua")
    assert core.timeout_ms == 30_000
    core.set_config(timeout=1500)
    assert core.timeout_ms == 1500
    with pytest.raises(ValueError):
        core.set_config(timeout=0)


def test_every_endpoint_is_a_coroutine_method():
    methods = [name for name in vars(SDK) if not name.startswith("_") and name not in ("config", "auth", "server")]
    assert len(methods) == 149
    assert all(inspect.iscoroutinefunction(getattr(SDK, name)) for name in methods)
