"""Central API router composition.

Mounts the route modules on one router for `FastAPI.include_router(...)`. The
level object routes sit at the root path because the Unity client calls
`/prepare`, `/get-objects`, etc. directly.
"""

from fastapi import APIRouter

from .objects import router as objects_router

router = APIRouter()

router.include_router(objects_router)
