from holoauth.web.routers.auth import router as auth_router
from holoauth.web.routers.profile import router as profile_router
from holoauth.web.routers.validate import router as validate_router

__all__ = [
    "auth_router",
    "profile_router",
    "validate_router",
]
