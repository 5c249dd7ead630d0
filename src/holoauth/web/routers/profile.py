from fastapi import APIRouter

from holoauth.core.modules.user.models import UserView
from holoauth.web.deps import AppDep, SessionTokenDep
from holoauth.web.openapi import ErrorResponse

router = APIRouter(tags=["profile"])


@router.get(
    "/profile",
    summary="Get current user profile",
    description="Get the profile of the currently signed-in user.",
    operation_id="getCurrentUserProfile",
    responses={
        200: {"description": "Current user profile"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
    },
)
async def get_profile(app: AppDep, session_token: SessionTokenDep) -> UserView:
    return await app.get_current_user(session_token)
