from typing import Annotated

from fastapi import APIRouter, Form, Response
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from holoauth.config import Config
from holoauth.core.modules.auth.models import AuthResult, Outcome
from holoauth.web.deps import AppDep, ConfigDep, SessionTokenDep

router = APIRouter(tags=["auth"])

STATUS_CODES = {
    Outcome.OK: 200,
    Outcome.INVALID: 400,
    Outcome.UNAUTHORIZED: 401,
    Outcome.SERVER_ERROR: 500,
}


class AuthResponse(BaseModel):
    """Result of login or registration."""

    success: bool = Field(..., description="Whether the operation succeeded")
    message: str | None = Field(None, description="Outcome message")
    errors: list[dict[str, str]] | None = Field(None, description="Field-scoped validation errors")


class AuthStatusResponse(BaseModel):
    """Whether the caller already holds a live session."""

    authenticated: bool = Field(..., description="True when the session cookie is valid")


def build_auth_response(result: AuthResult, config: Config, ttl_seconds: int) -> JSONResponse:
    """Serialize the result and deliver the session token as a cookie on success."""
    response = JSONResponse(status_code=STATUS_CODES[result.outcome], content=result.model_dump(exclude_none=True))
    if result.session is not None:
        response.set_cookie(
            key=config.session_cookie_name,
            value=result.session.token,
            httponly=True,
            samesite="lax",
            secure=config.cookie_secure,
            max_age=ttl_seconds,
        )
    return response


@router.post(
    "/auth/login",
    summary="Authenticate user",
    description="Authenticate with email and password. On success the session token is set as a cookie.",
    operation_id="login",
    response_model=AuthResponse,
    responses={
        200: {"description": "Successfully authenticated"},
        400: {"model": AuthResponse, "description": "Missing email or password"},
        401: {"model": AuthResponse, "description": "Unknown account or wrong password"},
    },
)
async def login(
    app: AppDep,
    config: ConfigDep,
    email: Annotated[str, Form()] = "",
    password: Annotated[str, Form()] = "",
) -> JSONResponse:
    result = await app.login(email, password)
    return build_auth_response(result, config, app.session_ttl_seconds)


@router.post(
    "/auth/register",
    summary="Register account",
    description="Create an account and sign it in. All field errors are reported together.",
    operation_id="register",
    response_model=AuthResponse,
    responses={
        200: {"description": "Account created and signed in"},
        400: {"model": AuthResponse, "description": "Invalid input"},
        500: {"model": AuthResponse, "description": "Account could not be stored"},
    },
)
async def register(
    app: AppDep,
    config: ConfigDep,
    email: Annotated[str, Form()] = "",
    password: Annotated[str, Form()] = "",
    confirm_password: Annotated[str, Form()] = "",
) -> JSONResponse:
    result = await app.register(email, password, confirm_password)
    return build_auth_response(result, config, app.session_ttl_seconds)


@router.post(
    "/auth/logout",
    summary="End session",
    description="Invalidate the current session. Succeeds even without one.",
    operation_id="logout",
    status_code=204,
    responses={204: {"description": "Successfully logged out"}},
)
async def logout(app: AppDep, config: ConfigDep, session_token: SessionTokenDep, response: Response) -> None:
    await app.logout(session_token)
    response.delete_cookie(config.session_cookie_name, httponly=True, samesite="lax")


@router.get(
    "/auth/status",
    summary="Session status",
    description="Report whether the caller is already signed in, so login and register pages can redirect.",
    operation_id="getAuthStatus",
)
async def auth_status(app: AppDep, session_token: SessionTokenDep) -> AuthStatusResponse:
    return AuthStatusResponse(authenticated=await app.is_authenticated(session_token))
