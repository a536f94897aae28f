"""API schemas.

Pydantic models for request bodies and responses, used with `response_model=`
on the route decorators so the OpenAPI docs describe exactly what the Unity
client sends and receives.

Geometry fields (`position`, `rotation`, `scale`, `collider`) are opaque
strings. The service stores them as given; parsing them is the client's job.
"""

from pydantic import BaseModel, Field

from .queries import MAX_VERSION_LENGTH, VERSION_PATTERN


class LevelObjectFields(BaseModel):
    object_type: str
    position: str
    rotation: str
    scale: str
    collider: str


class LevelObject(LevelObjectFields):
    """One stored row of an `objects_v<version>` table."""

    id: int


class SetObjectRequest(LevelObjectFields):
    """Body of `POST /set-object`.

    `version` may be omitted only when the service runs with `DEFAULT_VERSION`.
    """

    version: str | None = Field(
        default=None,
        pattern=VERSION_PATTERN,
        max_length=MAX_VERSION_LENGTH,
    )


class ObjectsResponse(BaseModel):
    objects: list[LevelObject]


class FirstIdResponse(BaseModel):
    id: int


class CountResponse(BaseModel):
    """Row count after a write.

    `success` is false only when `/prepare` finds rows left behind after
    clearing the table.
    """

    count: int
    success: bool
