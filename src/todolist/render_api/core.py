"""Shared request core behind every generated SDK method.

Path placeholders are filled from ``metadata``; whatever is left over goes on
the query string. Bodies are sent as JSON.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Mapping
from urllib.parse import quote

import httpx

logger = logging.getLogger("todolist.render_api")

DEFAULT_SERVER = "https://api.render.com/v1"
DEFAULT_TIMEOUT_MS = 30_000

_PLACEHOLDER = re.compile(r"\{([A-Za-z0-9_]+)\}")


@dataclass
class FetchResponse:
    data: Any
    status: int
    headers: httpx.Headers
    res: httpx.Response


class FetchError(Exception):
    def __init__(self, status: int, data: Any, res: httpx.Response) -> None:
        super().__init__(f"{res.request.method} {res.request.url} returned {status}")
        self.status = status
        self.data = data
        self.res = res


def _parse_body(res: httpx.Response) -> Any:
    if not res.content:
        return None
    if "json" in res.headers.get("content-type", ""):
        return res.json()
    return res.text


class APICore:
    def __init__(self, user_agent: str, *, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self.user_agent = user_agent
        self.transport = transport
        self.server_url = DEFAULT_SERVER
        self.timeout_ms = DEFAULT_TIMEOUT_MS
        self._headers: dict[str, str] = {}
        self._auth: httpx.Auth | None = None

    def set_config(self, timeout: int | None = None) -> None:
        if timeout is not None:
            if timeout <= 0:
                raise ValueError("timeout must be a positive number of milliseconds")
            self.timeout_ms = timeout

    def set_auth(self, *values: str | int) -> None:
        if len(values) == 1:
            self._headers["Authorization"] = f"Bearer {values[0]}"
            self._auth = None
        elif len(values) == 2:
            self._headers.pop("Authorization", None)
            self._auth = httpx.BasicAuth(str(values[0]), str(values[1]))
        else:
            raise ValueError("auth() takes one token or a username and password")

    def set_server(self, url: str, variables: Mapping[str, Any] | None = None) -> None:
        variables = variables or {}

        def _sub(match: re.Match) -> str:
            name = match.group(1)
            return str(variables[name]) if name in variables else match.group(0)

        self.server_url = _PLACEHOLDER.sub(_sub, url).rstrip("/")

    def build_request_args(self, path: str, metadata: Mapping[str, Any] | None) -> tuple[str, dict[str, Any]]:
        """Split metadata into the expanded path and the query parameters."""
        params = {k: v for k, v in (metadata or {}).items() if v is not None}

        def _fill(match: re.Match) -> str:
            name = match.group(1)
            if name not in params:
                raise ValueError(f"missing path parameter {name!r} for {path}")
            return quote(str(params.pop(name)), safe="")

        return _PLACEHOLDER.sub(_fill, path), params

    async def fetch(
        self,
        path: str,
        method: str,
        body: Any = None,
        metadata: Mapping[str, Any] | None = None,
    ) -> FetchResponse:
        url_path, params = self.build_request_args(path, metadata)
        headers = {"User-Agent": self.user_agent, "Accept": "application/json", **self._headers}

        async with httpx.AsyncClient(
            base_url=self.server_url,
            timeout=httpx.Timeout(self.timeout_ms / 1000),
            transport=self.transport,
        ) as client:
            res = await client.request(
                method.upper(),
                url_path,
                params=params or None,
                json=body,
                headers=headers,
                auth=self._auth,
            )

        data = _parse_body(res)
        if res.status_code >= 400:
            logger.warning(
                "render.error",
                extra={
                    "category": "render",
                    "event": "render.error",
                    "method": method.upper(),
                    "path": url_path,
                    "status_code": res.status_code,
                },
            )
            raise FetchError(res.status_code, data, res)
        return FetchResponse(data=data, status=res.status_code, headers=res.headers, res=res)
