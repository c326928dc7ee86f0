import logging

from fastapi import Depends, HTTPException

from adapter.fake.user_repository import FakeUserRepository
from adapter.mongodb.connection import get_mongodb_client
from adapter.mongodb.user_repository import MongoUserRepository
from adapter.security.bcrypt_hasher import BcryptPasswordHasher
from adapter.security.jwt_token_service import JwtTokenService
from port.password_hasher import PasswordHasher
from port.token_service import TokenService
from port.user_repository import UserRepository
from utils.settings import Settings, get_settings

logger = logging.getLogger(__name__)

_memory_repo: FakeUserRepository | None = None


def _get_memory_repo() -> FakeUserRepository:
    """Process-local store for running without MongoDB (data is lost on restart)."""
    global _memory_repo
    if _memory_repo is None:
        logger.warning("MONGO_URL not configured, users are kept in memory only")
        _memory_repo = FakeUserRepository()
    return _memory_repo


def get_user_repo(settings: Settings = Depends(get_settings)) -> UserRepository:
    if not settings.mongo_url:
        return _get_memory_repo()

    client = get_mongodb_client(settings.mongo_url)
    if client is None:
        raise HTTPException(status_code=503, detail="Database unavailable")
    return MongoUserRepository(client[settings.database_name])


def get_password_hasher(settings: Settings = Depends(get_settings)) -> PasswordHasher:
    return BcryptPasswordHasher(rounds=settings.bcrypt_rounds)


def get_token_service(settings: Settings = Depends(get_settings)) -> TokenService:
    return JwtTokenService(settings.jwt_secret_key, algorithm=settings.jwt_algorithm)
