"""Database session and connectivity helpers for the API service.

The engine and its `sessionmaker` are built at startup (see `main.lifespan`)
and kept on `app.state`, not in module globals. Route handlers receive a
request-scoped session through the `get_db` dependency, which tests can
override with `app.dependency_overrides[get_db]`.
"""

import logging

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from level_common.db import create_db_engine

from .settings import Settings

logger = logging.getLogger(__name__)


def init_engine(settings: Settings) -> Engine:
    """Create the engine and verify the database is reachable.

    Runs `SELECT 1` once so that a bad `DATABASE_URL` or an unreachable server
    stops the service at startup rather than on the first request.

    Raises:
        sqlalchemy.exc.SQLAlchemyError: If the connectivity check fails.
    """
    engine = create_db_engine(
        settings.database_url,
        pool_size=settings.db_pool_size,
        pool_timeout=settings.db_pool_timeout,
        statement_timeout_ms=settings.db_statement_timeout_ms,
    )
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except Exception:
        engine.dispose()
        raise

    logger.info("Connected to %s database", engine.dialect.name)
    return engine


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine)


def get_db(request: Request):
    """FastAPI dependency that yields a request-scoped SQLAlchemy session.

    Route handlers declare `db: Session = Depends(get_db)`.

    Yields:
        sqlalchemy.orm.Session: An open session for the duration of the request.

    Notes:
        Handlers that write open a transaction with `with db.begin():`, which
        commits on success and rolls back on any exception. The session is
        always closed in `finally`, returning its connection to the pool.
    """
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
