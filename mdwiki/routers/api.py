from fastapi import APIRouter

from mdwiki.routers.content import router as content_router
from mdwiki.routers.health import router as health_router

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(health_router)
api_router.include_router(content_router)
