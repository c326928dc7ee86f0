"""Process-wide configuration, read once from the environment."""

import os
from dataclasses import dataclass, field
from functools import lru_cache

DEFAULT_BCRYPT_ROUNDS = 10


@dataclass(frozen=True)
class Settings:
    jwt_secret_key: str
    jwt_algorithm: str = "HS256"
    bcrypt_rounds: int = DEFAULT_BCRYPT_ROUNDS
    mongo_url: str | None = None
    database_name: str = "auth"
    cors_origins: list[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"
    port: int = 8000


def _parse_origins(raw: str) -> list[str]:
    if raw.strip() == "*":
        return ["*"]
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def load_settings() -> Settings:
    """Build Settings from environment variables.

    Raises:
        ValueError: JWT_SECRET_KEY is missing or blank
    """
    secret = os.getenv("JWT_SECRET_KEY", "").strip()
    if not secret:
        raise ValueError(
            "JWT_SECRET_KEY environment variable is required. "
            "Generate a secure key with: openssl rand -hex 32"
        )

    return Settings(
        jwt_secret_key=secret,
        jwt_algorithm=os.getenv("JWT_ALGORITHM", "HS256"),
        bcrypt_rounds=int(os.getenv("BCRYPT_ROUNDS", DEFAULT_BCRYPT_ROUNDS)),
        mongo_url=os.getenv("MONGO_URL") or None,
        database_name=os.getenv("MONGODB_DATABASE", "auth"),
        cors_origins=_parse_origins(os.getenv("CORS_ORIGINS", "*")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        port=int(os.getenv("PORT", 8000)),
    )


@lru_cache
def get_settings() -> Settings:
    """Settings loaded on first use and shared for the life of the process."""
    return load_settings()
