"""FastAPI application factory for the teammate score API."""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI

from wowbehave.api import routes
from wowbehave.store.client import KeyStore


def create_app(store: KeyStore | None = None, lifespan: Any = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: Key store used by every route. May be left None when a
            lifespan sets ``app.state.store`` on startup instead.
        lifespan: Optional async context manager for startup/shutdown.
            Used by main.py to open and close the store connection.

    Returns:
        Configured FastAPI application with all routes registered.
    """
    app = FastAPI(
        title="WoW Behave Teammate Score API",
        lifespan=lifespan,
    )
    app.state.store = store

    app.include_router(routes.router)

    return app
