from community.api.v1.routes.messages import router as messages_router
from community.api.v1.routes.users import router as users_router

__all__ = ["messages_router", "users_router"]
