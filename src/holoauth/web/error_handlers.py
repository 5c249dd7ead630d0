import structlog
from fastapi import Request
from fastapi.responses import JSONResponse, Response

logger = structlog.get_logger(__name__)


def create_json_error_response(status_code: int, message: str, error_type: str | None = None) -> JSONResponse:
    """Create JSON error response with optional type for machine parsing."""
    content = {"message": message}
    if error_type:
        content["type"] = error_type
    return JSONResponse(status_code=status_code, content=content)


async def authentication_error_handler(_: Request, exc: Exception) -> Response:
    """Handle requests that need a session but carry none (401)."""
    return create_json_error_response(status_code=401, message=str(exc), error_type="authentication_error")


async def general_exception_handler(_: Request, exc: Exception) -> Response:
    """Handle unexpected errors (500)."""
    logger.exception("unexpected_error", error=str(exc))
    return create_json_error_response(
        status_code=500, message="An unexpected error occurred.", error_type="internal_server_error"
    )
