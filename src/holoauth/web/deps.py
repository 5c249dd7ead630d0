from typing import Annotated, cast

from fastapi import Depends, Request

from holoauth.app import App
from holoauth.config import Config
from holoauth.core.modules.session.models import SessionToken


async def get_app(request: Request) -> App:
    return cast(App, request.app.state.app)


async def get_config(request: Request) -> Config:
    return cast(Config, request.app.state.config)


async def get_session_token(request: Request, config: Annotated[Config, Depends(get_config)]) -> SessionToken | None:
    """Read the session token from the cookie; validity is checked by the services."""
    token = request.cookies.get(config.session_cookie_name)
    return SessionToken(token) if token else None


# Type aliases for dependencies
AppDep = Annotated[App, Depends(get_app)]
ConfigDep = Annotated[Config, Depends(get_config)]
SessionTokenDep = Annotated[SessionToken | None, Depends(get_session_token)]
