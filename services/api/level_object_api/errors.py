"""Exception-to-response mapping.

Handlers raise `HTTPException(404)` for missing rows themselves. Everything
else is translated here so that callers can tell the failure kinds apart:

- `InvalidVersionError` -> 422, same as any other request validation error
- `sqlalchemy.exc.TimeoutError` (no pooled connection available) -> 503
- any other `SQLAlchemyError` -> 500

Database error details are logged, not returned to the client.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError

from .queries import InvalidVersionError

logger = logging.getLogger(__name__)


async def invalid_version_handler(request: Request, exc: InvalidVersionError):
    return JSONResponse(
        status_code=422,
        content={
            "detail": [
                {
                    "type": "invalid_version",
                    "loc": ["version"],
                    "msg": str(exc),
                    "input": exc.version,
                }
            ]
        },
    )


async def pool_timeout_handler(request: Request, exc: PoolTimeoutError):
    logger.warning("No database connection available for %s: %s", request.url.path, exc)
    return JSONResponse(status_code=503, content={"detail": "Database busy, retry later"})


async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error("Database error on %s", request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Database error"})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(InvalidVersionError, invalid_version_handler)
    app.add_exception_handler(PoolTimeoutError, pool_timeout_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
