from gatehouse.presentation.api.routers.auth import router as auth_router
from gatehouse.presentation.api.routers.system import router as system_router

__all__ = ["auth_router", "system_router"]
