"""Entry point for the teammate score API.

Loads settings, configures logging, and serves the FastAPI app with
uvicorn. The Upstash key store is opened inside the app lifespan and
closed on shutdown; route handlers reach it through app.state.
"""

import asyncio
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from wowbehave.api.app import create_app
from wowbehave.config import AppSettings
from wowbehave.logging import get_logger, setup_logging
from wowbehave.store.upstash_client import UpstashKeyStore


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the key store on startup and close it on shutdown."""
    logger = get_logger("wowbehave.main")
    settings: AppSettings = app.state.settings

    if not settings.store.token.get_secret_value():
        logger.warning("no_store_token_configured", url=settings.store.url)

    store = UpstashKeyStore(settings.store)
    app.state.store = store
    logger.info("lifespan_started", store_url=settings.store.url)

    try:
        yield
    finally:
        await store.close()
        logger.info("wowbehave_stopped")


async def run() -> None:
    """Run the API server until interrupted."""
    settings = AppSettings()

    setup_logging(settings.log_level)
    logger = get_logger("wowbehave.main")

    app = create_app(lifespan=lifespan)
    app.state.settings = settings

    logger.info("starting_server", host=settings.server.host, port=settings.server.port)

    config = uvicorn.Config(
        app,
        host=settings.server.host,
        port=settings.server.port,
        log_level="warning",  # Suppress uvicorn access logs
    )
    server = uvicorn.Server(config)
    await server.serve()


def main() -> None:
    """Synchronous entry point."""
    asyncio.run(run())


if __name__ == "__main__":
    main()
