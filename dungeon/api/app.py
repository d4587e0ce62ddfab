"""FastAPI application factory with lifespan management."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dungeon.api.dependencies import set_session_manager
from dungeon.api.routes import api_router
from dungeon.api.session_manager import SessionManager
from dungeon.config import DungeonConfig
from dungeon.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def create_app(config: DungeonConfig | None = None, configure_logging: bool = True) -> FastAPI:
    """Build and return the fully-configured FastAPI application."""
    if config is None:
        config = DungeonConfig()

    _config = config

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if configure_logging:
            setup_logging(_config.log_level)
        set_session_manager(SessionManager(_config))
        logger.info("API server started — session ready.")
        yield
        set_session_manager(None)
        logger.info("API server shutting down.")

    app = FastAPI(
        title="Dungeon Simulation Core",
        description=(
            "Turn-based grid dungeon: map generation, field of view, monster chase AI.\n\n"
            "## API Groups\n\n"
            "- **Map** — Tile layout with revealed / visible flags\n"
            "- **State** — Turn, run state, visible actors, recent events\n"
            "- **Events** — Message log filtered by turn or actor\n"
            "- **Action** — One player action per request, followed by one turn\n"
            "- **Config** — Read-only dungeon configuration\n"
        ),
        version="0.1.0",
        lifespan=lifespan,
    )

    # CORS: allow any origin in dev
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)
    return app
