from community.api.routes.info import router as info_router
from community.api.v1 import api_v1_router

__all__ = ["api_v1_router", "info_router"]
