"""FastAPI application factory / entrypoint.

This service stores and serves level objects (type, position, rotation, scale,
collider) in versioned Postgres tables. It is consumed by:
- the Unity level editor scene, which resets a table and uploads objects,
- the game client and companion server, which read them back.

Operational notes:
- `DATABASE_URL` is required; startup fails if the database is unreachable.
- Schema migrations are applied by the separate `level-objects-migrate` job,
  never by this service.
- Run with `level-objects-api` or `uvicorn --factory level_object_api.main:create_app`.
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from level_common.logging import setup_logging

from .db import init_engine, make_session_factory
from .errors import register_exception_handlers
from .routes import router
from .settings import Settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the connection pool before serving and dispose of it on shutdown."""
    settings = app.state.settings
    engine = init_engine(settings)
    app.state.engine = engine
    app.state.session_factory = make_session_factory(engine)
    try:
        yield
    finally:
        engine.dispose()
        logger.info("Database pool disposed")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Explicit settings (tests). Read from the environment when omitted.

    Returns:
        FastAPI: Configured application. The database engine is created when
        the app starts, not here.
    """
    if settings is None:
        settings = Settings()

    setup_logging(settings.log_level)

    app = FastAPI(title="Level Object API", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings

    register_exception_handlers(app)
    app.include_router(router)

    @app.get("/health")
    def health():
        """Health check endpoint.

        Returns:
            dict: `{"status": "ok", "service": "level-objects"}`.
        """
        return {"status": "ok", "service": "level-objects"}

    return app


def main() -> None:
    """Console entrypoint: serve the app with uvicorn on HOST:PORT."""
    settings = Settings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
