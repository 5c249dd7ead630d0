from typing import Annotated

from fastapi import APIRouter, Form

from holoauth.core.modules.auth.models import EmailAvailability
from holoauth.core.modules.user.validators import PasswordStrength
from holoauth.web.deps import AppDep

router = APIRouter(tags=["validate"])


@router.post(
    "/validate/email",
    summary="Check email",
    description="Check that an email is well-formed and not yet registered.",
    operation_id="validateEmail",
)
async def validate_email(app: AppDep, email: Annotated[str, Form()] = "") -> EmailAvailability:
    return await app.check_email_availability(email)


@router.post(
    "/validate/password",
    summary="Score password",
    description="Score password strength from 0 to 6 with hints for missing requirements.",
    operation_id="validatePassword",
)
async def validate_password(app: AppDep, password: Annotated[str, Form()] = "") -> PasswordStrength:
    return app.check_password_strength(password)
