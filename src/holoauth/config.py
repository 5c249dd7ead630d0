from typing import Literal

from pydantic_settings import BaseSettings


class Config(BaseSettings):
    """Application configuration loaded from environment variables."""

    database_url: str  # MongoDB URL including the database name, e.g. mongodb://localhost:27017/holoauth
    host: str = "0.0.0.0"  # noqa: S104
    port: int = 3000
    debug: bool = False
    cors_origins: list[str] = []
    session_backend: Literal["memory", "mongo"] = "memory"
    session_ttl_hours: int = 24
    session_cookie_name: str = "session_id"
    cookie_secure: bool = False  # Set to True when served over HTTPS
    bcrypt_rounds: int = 12
    seed_demo_user: bool = True  # Create demo@hologram.io on startup if missing

    model_config = {
        "env_file": [".env"],
        "env_prefix": "HOLOAUTH_",
        "extra": "ignore",
    }
