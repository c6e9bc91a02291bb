"""
Application FastAPI de graphql-moviedb.

Initialise le Container DI et le logging au demarrage, monte le endpoint
GraphQL (/graphql) et une route de sante (/health).
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from loguru import logger

from ..adapters.graphql.router import MovieDatabaseRouter
from ..container import Container
from ..logging_config import configure_logging


def create_app(container: Optional[Container] = None) -> FastAPI:
    """
    Construit l'application web.

    Args:
        container: Container DI a utiliser (un nouveau container si None)
    """
    container = container or Container()
    settings = container.config()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Configure le logging au demarrage et ferme les caches a l'arret."""
        configure_logging(
            log_level=settings.log_level,
            log_file=settings.log_file,
            rotation_size=settings.log_rotation_size,
            retention_count=settings.log_retention_count,
        )
        logger.info(
            "Demarrage de graphql-moviedb",
            environment=settings.environment,
            v3=settings.v3_enabled,
            v4=settings.v4_enabled,
        )
        yield
        container.api_cache().close()
        container.session_cache().close()

    app = FastAPI(title="graphql-moviedb", lifespan=lifespan)
    app.state.container = container
    app.include_router(MovieDatabaseRouter(development=settings.is_development))

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app


app = create_app()
