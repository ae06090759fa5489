"""Dependency injection factory."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Annotated

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from task_board.config import STATUSES, Config
from task_board.store import TaskStore

logger = logging.getLogger(__name__)

# Global config instance for dependency injection
_config: Config | None = None


def get_config() -> Config:
    """Get or create Config instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def get_task_store(request: Request) -> TaskStore:
    """Return the store owned by the running application."""
    store: TaskStore = request.app.state.task_store
    return store


StoreDep = Annotated[TaskStore, Depends(get_task_store)]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Manage application lifecycle - startup and shutdown."""
    store: TaskStore = app.state.task_store
    logger.info(f"[Lifespan] Task board ready with stages: {', '.join(STATUSES)}")
    try:
        yield
    finally:
        logger.info("[Lifespan] Releasing task store...")
        store.clear()


def create_app(store: TaskStore | None = None) -> FastAPI:
    """Create FastAPI application (composition root).

    Args:
        store: Task store to serve. A fresh empty store is created when omitted.
    """
    from task_board.api.errors import register_error_handlers
    from task_board.api.meta import router as meta_router
    from task_board.api.tasks import router as tasks_router

    app = FastAPI(
        title="TaskBoard",
        description="Kanban board for the content pipeline",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.task_store = store if store is not None else TaskStore()

    # The board page may be served from another origin during development
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    # Mount API routes
    app.include_router(tasks_router)
    app.include_router(meta_router)

    # Mount static files (HTML/CSS/JS)
    static_dir = Path(__file__).parent / "static"
    if static_dir.exists():
        app.mount("/", StaticFiles(directory=str(static_dir), html=True), name="static")

    return app
