"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from nutrition_insights.api.routes import router as insights_router
from nutrition_insights.app_logging import configure_logging
from nutrition_insights.config import parse_cors_origins
from nutrition_insights.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        try:
            app.state.container.insights_service.check_store()
        except Exception:
            logger.exception("Record store is unavailable")
            raise
        yield

    app = FastAPI(title="Nutritional Insights", lifespan=lifespan)
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_cors_origins(container.settings.cors_origins),
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    app.include_router(insights_router)

    @app.get("/")
    async def root() -> dict[str, object]:
        """Service banner."""
        return {"ok": True, "message": "Nutritional Insights Backend Running"}

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
