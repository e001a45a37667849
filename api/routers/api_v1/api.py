from fastapi import APIRouter

from api.routers.api_v1.endpoints import gemstones, goblets, sessions


api_router = APIRouter()

api_router.include_router(sessions.router, prefix="/sessions", tags=["Sessions"])
api_router.include_router(gemstones.router, prefix="/gemstones", tags=["Gemstones"])
api_router.include_router(goblets.router, prefix="/goblets", tags=["Goblets"])
