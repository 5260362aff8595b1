"""FastAPI API endpoints under /api.

Endpoint groups: health, vikings (list, OpenSea metadata, generate),
admin (synthetic batch generation, distribution stats, reset). Generated
images are served by the app under /api/static.
"""

from fastapi import APIRouter

from .admin import router as admin_router
from .system import router as system_router
from .vikings import router as vikings_router

router = APIRouter()
router.include_router(system_router)
router.include_router(vikings_router)
router.include_router(admin_router)
