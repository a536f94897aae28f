"""API router package.

Most code should import the composed router via:

    from level_object_api.routes import router

The actual composition lives in `level_object_api/routes/api_router.py`.
"""

from .api_router import router
