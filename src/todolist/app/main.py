import os
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from todolist.app.routes import items
from todolist.infra.db.sqlite import create_tables, make_sqlite_url, make_engine, make_sessionmaker
from todolist.infra.db.item_repo_sqlite import Base, SQLiteItemRepo
from todolist.infra.db.item_repo_memory import InMemoryItemRepo
from todolist.services.item_service import ItemService
from todolist.observability.logging import setup_logging
from todolist.app.middleware.access_log import AccessLogMiddleware

logger = logging.getLogger("todolist.system")


def create_app() -> FastAPI:
    setup_logging("items.jsonl")
    logger.info("system.start", extra={"category": "system", "event": "system.start", "service": "items"})

    app = FastAPI(title="ToDoList Items API")
    app.add_middleware(AccessLogMiddleware, service="items")

    origins = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["*"],
    )

    store = os.getenv("ITEMS_STORE", "sqlite").lower()
    if store == "memory":
        repo = InMemoryItemRepo()
        engine = None
        db_path = None
    else:
        # --- SQLite wiring ---
        db_path = os.getenv("DB_PATH", "./data/todolist.db")
        engine = make_engine(make_sqlite_url(db_path), echo=os.getenv("SQL_ECHO", "").lower() in ("1", "true"))
        repo = SQLiteItemRepo(make_sessionmaker(engine))

    app.state.item_service = ItemService(repo)

    app.include_router(items.router)

    @app.on_event("startup")
    async def _startup():
        tables = await create_tables(engine, Base.metadata) if engine is not None else []
        logger.info(
            "db.ready",
            extra={"category": "system", "event": "db.ready", "store": store, "db_path": db_path, "tables": tables},
        )

    @app.on_event("shutdown")
    async def _shutdown():
        if engine is not None:
            await engine.dispose()

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


app = create_app()
