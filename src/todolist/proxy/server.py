import os
import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import JSONResponse, PlainTextResponse

from todolist.app.middleware.access_log import AccessLogMiddleware
from todolist.observability.logging import setup_logging
from todolist.render_api.sdk import SDK

logger = logging.getLogger("todolist.proxy")

LIST_SERVICES_PARAMS = {"includePreviews": "true", "limit": "20"}


def create_app(sdk: Optional[SDK] = None) -> FastAPI:
    setup_logging("proxy.jsonl")
    logger.info("system.start", extra={"category": "system", "event": "system.start", "service": "proxy"})

    sdk = sdk or SDK()
    server_url = os.getenv("RENDER_API_URL")
    if server_url:
        sdk.server(server_url)

    api_key = os.getenv("RENDER_API_KEY", "")
    if not api_key:
        logger.warning("render.no_api_key", extra={"category": "proxy", "event": "render.no_api_key"})

    app = FastAPI(title="ToDoList Render Proxy")
    app.add_middleware(AccessLogMiddleware, service="proxy")

    @app.get("/")
    async def list_services():
        try:
            sdk.auth(api_key)
            res = await sdk.list_services(LIST_SERVICES_PARAMS)
        except Exception:
            logger.exception("render.list_services_failed", extra={"category": "proxy", "event": "render.list_services_failed"})
            return PlainTextResponse("Error fetching services", status_code=500)
        return JSONResponse(res.data)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


app = create_app()
