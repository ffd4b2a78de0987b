"""FastAPI application entry point.

This module creates and configures the FastAPI application instance.
Building it validates the configuration, so a missing YouTube API key
stops the process here.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ytlookup import __version__
from ytlookup.api import register_error_handlers, router
from ytlookup.core.config import get_config
from ytlookup.core.container import close_http_client
from ytlookup.core.logging import get_logger, setup_logging

setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan events.

    Args:
        app: FastAPI application instance

    Yields:
        None
    """
    config = get_config()
    logger.info("Starting YouTube lookup gateway", env=config.app_env, port=config.api_port)

    yield

    logger.info("Shutting down YouTube lookup gateway")
    await close_http_client()
    logger.info("Cleanup complete")


_config = get_config()
app = FastAPI(
    title=_config.app_name,
    description="Resolve YouTube channel identifiers and page through channel lists",
    version=__version__,
    debug=_config.debug,
    docs_url="/docs" if _config.is_development else None,
    redoc_url="/redoc" if _config.is_development else None,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_config.cors_origins,
    allow_credentials=_config.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)
app.include_router(router)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint.

    Returns:
        Health status
    """
    cfg = get_config()
    return {
        "status": "healthy",
        "app": cfg.app_name,
        "env": cfg.app_env,
    }


def run() -> None:
    """Serve the application with uvicorn."""
    import uvicorn

    cfg = get_config()
    uvicorn.run(app, host=cfg.api_host, port=cfg.api_port, log_config=None)


if __name__ == "__main__":
    run()
