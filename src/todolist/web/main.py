from pathlib import Path
from typing import Optional
import os
import logging
from urllib.parse import urlencode

from fastapi import FastAPI, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from starlette.templating import Jinja2Templates

from todolist.app.middleware.access_log import AccessLogMiddleware
from todolist.client.task_client import DEFAULT_BASE_URL, TaskApiError, TaskClient, build_http_client
from todolist.observability.logging import setup_logging

BASE_DIR = Path(__file__).resolve().parent
templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))
logger = logging.getLogger("todolist.web")


def _back_home(error: Optional[str] = None) -> RedirectResponse:
    url = "/?" + urlencode({"error": error}) if error else "/"
    return RedirectResponse(url, status_code=303)


def create_app(client: Optional[TaskClient] = None) -> FastAPI:
    setup_logging("web.jsonl")
    logger.info("system.start", extra={"category": "system", "event": "system.start", "service": "web"})

    if client is None:
        base_url = os.getenv("TODO_API_URL", DEFAULT_BASE_URL)
        timeout = float(os.getenv("HTTP_TIMEOUT_SECONDS", "30"))
        client = TaskClient(build_http_client(base_url, timeout=timeout))
        logger.info("client.ready", extra={"category": "system", "event": "client.ready", "base_url": base_url})

    app = FastAPI(title="ToDoList")
    app.add_middleware(AccessLogMiddleware, service="web")
    app.mount("/static", StaticFiles(directory=str(BASE_DIR / "static")), name="static")

    @app.on_event("shutdown")
    async def _shutdown():
        await client.aclose()

    @app.get("/", response_class=HTMLResponse)
    async def home(request: Request, error: Optional[str] = None):
        try:
            tasks = await client.get_tasks()
        except TaskApiError:
            # already logged as api.error by the client
            tasks = []
            error = error or "Could not load tasks"
        return templates.TemplateResponse(request, "index.html", {"tasks": tasks, "error": error})

    @app.post("/tasks")
    async def add_task(name: str = Form(...)):
        try:
            await client.add_task(name)
        except TaskApiError:
            return _back_home("Could not add task")
        return _back_home()

    @app.post("/tasks/{task_id}/complete")
    async def set_completed(task_id: int, name: str = Form(...), is_complete: bool = Form(...)):
        try:
            await client.set_completed(task_id, name, is_complete)
        except TaskApiError:
            return _back_home("Could not update task")
        return _back_home()

    @app.post("/tasks/{task_id}/delete")
    async def delete_task(task_id: int):
        try:
            await client.delete_task(task_id)
        except TaskApiError:
            return _back_home("Could not delete task")
        return _back_home()

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


app = create_app()
