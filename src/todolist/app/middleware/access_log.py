import time
import uuid
import logging
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("todolist.access")


class AccessLogMiddleware(BaseHTTPMiddleware):
    """Logs request.start/request.end around every request, tagged with the app name."""

    def __init__(self, app, service: str = "todolist", quiet_paths: tuple = ("/health",)):
        super().__init__(app)
        self.service = service
        self.quiet_paths = frozenset(quiet_paths)

    def _extra(self, event: str, request: Request, request_id: str, **fields) -> dict:
        return {
            "category": "http",
            "event": event,
            "service": self.service,
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            **fields,
        }

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        request.state.request_id = request_id

        if request.url.path in self.quiet_paths:
            response = await call_next(request)
            response.headers["X-Request-ID"] = request_id
            return response

        start = time.perf_counter()
        logger.info(
            "request.start",
            extra=self._extra(
                "request.start",
                request,
                request_id,
                query=str(request.url.query),
                client=request.client.host if request.client else None,
            ),
        )

        try:
            response: Response = await call_next(request)
        except Exception:
            duration_ms = round((time.perf_counter() - start) * 1000, 2)
            logger.exception("request.error", extra=self._extra("request.error", request, request_id, duration_ms=duration_ms))
            raise

        duration_ms = round((time.perf_counter() - start) * 1000, 2)
        response.headers["X-Request-ID"] = request_id

        logger.info(
            "request.end",
            extra=self._extra(
                "request.end",
                request,
                request_id,
                status_code=response.status_code,
                duration_ms=duration_ms,
            ),
        )
        return response
