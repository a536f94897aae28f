"""Level object routes.

Endpoints used by the Unity level editor scene (writes) and by the game client
and companion server (reads). Every endpoint addresses one versioned table,
`objects_v<version>`, chosen by the `version` query parameter or body field.

Data source:
- Postgres tables created on demand by `/prepare`.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.exceptions import RequestValidationError
from sqlalchemy.orm import Session

from .. import queries
from ..db import get_db
from ..queries import MAX_VERSION_LENGTH, VERSION_PATTERN
from ..schemas import (
    CountResponse,
    FirstIdResponse,
    LevelObject,
    ObjectsResponse,
    SetObjectRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["objects"])


def _resolve_version(version: str | None, request: Request) -> str:
    """Fall back to the configured default version when none is given.

    Raises:
        RequestValidationError: If no version was sent and no default is configured.
        InvalidVersionError: If the configured default is not a safe token.
    """
    if version is None:
        version = request.app.state.settings.default_version
    if version is None:
        raise RequestValidationError(
            [{"type": "missing", "loc": ("version",), "msg": "Field required", "input": None}]
        )
    return queries.validate_version(version)


def get_version(
    request: Request,
    version: str | None = Query(
        default=None,
        pattern=VERSION_PATTERN,
        max_length=MAX_VERSION_LENGTH,
        description="Table version token; selects `objects_v<version>`.",
    ),
) -> str:
    """Dependency returning the validated version token for a GET request."""
    return _resolve_version(version, request)


@router.get("/prepare", response_model=CountResponse)
def prepare_table(version: str = Depends(get_version), db: Session = Depends(get_db)):
    """Create the version's table if needed and delete all of its rows.

    Called by the level editor before uploading a fresh layout. Runs in one
    transaction: create, delete, then count what is left.

    Args:
        version: Table version token.
        db: SQLAlchemy session (injected).

    Returns:
        CountResponse: `{count: 0, success: true}` on success. A nonzero count
        is reported with `success: false` rather than as an error.
    """
    create_sql = queries.create_table_sql(version, db.get_bind().dialect.name)
    delete_sql = queries.delete_all_sql(version)
    count_sql = queries.row_count_sql(version)

    with db.begin():
        db.execute(create_sql)
        db.execute(delete_sql)
        count = int(db.execute(count_sql).scalar_one())

    if count != 0:
        logger.warning("Table %s still has %d rows after prepare", queries.table_name(version), count)
        return CountResponse(count=count, success=False)

    logger.info("Prepared table %s", queries.table_name(version))
    return CountResponse(count=0, success=True)


@router.get("/get-objects", response_model=ObjectsResponse)
def get_objects(version: str = Depends(get_version), db: Session = Depends(get_db)):
    """Return every object in the version's table (empty list if none)."""
    rows = db.execute(queries.select_all_sql(version)).mappings().all()
    return {"objects": [dict(r) for r in rows]}


@router.get("/get-object", response_model=LevelObject)
def get_object(
    version: str = Depends(get_version),
    object_id: int = Query(..., alias="id"),
    db: Session = Depends(get_db),
):
    """Fetch a single object by id.

    Raises:
        HTTPException: 404 if no row has that id.
    """
    row = db.execute(
        queries.select_by_id_sql(version),
        {"id": object_id},
    ).mappings().first()

    if not row:
        raise HTTPException(status_code=404, detail="Object not found")

    return dict(row)


@router.get("/get-first", response_model=FirstIdResponse)
def get_first_id(version: str = Depends(get_version), db: Session = Depends(get_db)):
    """Return the smallest id in the version's table.

    Raises:
        HTTPException: 404 if the table is empty.
    """
    first_id = db.execute(queries.first_id_sql(version)).scalar()

    if first_id is None:
        raise HTTPException(status_code=404, detail="No objects found")

    return {"id": int(first_id)}


@router.post("/set-object", response_model=CountResponse)
def set_object(body: SetObjectRequest, request: Request, db: Session = Depends(get_db)):
    """Insert one object and return the table's new row count.

    Insert and count share a transaction. If the insert fails the transaction
    is rolled back, the count is never run, and the error reaches the client.

    Args:
        body: Object fields plus the version token.
        request: Current request (for the configured default version).
        db: SQLAlchemy session (injected).

    Returns:
        CountResponse: `{count, success: true}`.
    """
    version = _resolve_version(body.version, request)
    insert_sql = queries.insert_sql(version)
    count_sql = queries.row_count_sql(version)
    params = body.model_dump(include=set(queries.OBJECT_FIELDS))

    with db.begin():
        db.execute(insert_sql, params)
        count = int(db.execute(count_sql).scalar_one())

    return CountResponse(count=count, success=True)
