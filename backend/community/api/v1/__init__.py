from fastapi import APIRouter

from community.api.v1.routes import messages_router, users_router
from community.core.config import settings

api_v1_router = APIRouter(prefix=settings.API_V1_STR)
api_v1_router.include_router(messages_router)
api_v1_router.include_router(users_router)

__all__ = ["api_v1_router"]
