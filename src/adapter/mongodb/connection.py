import logging
from time import monotonic
from pymongo import MongoClient
from pymongo.errors import ConnectionFailure, PyMongoError

logger = logging.getLogger(__name__)

# Driver-level logs are noisy at INFO
logging.getLogger('pymongo').setLevel(logging.WARNING)

USERS_COLLECTION_NAME = 'users'

# Seconds to wait before retrying a URL whose last connection attempt failed
RETRY_COOLDOWN_SECONDS = 10

_client_cache: MongoClient | None = None
_retry_after: dict[str, float] = {}


def reset_client():
    global _client_cache
    _client_cache = None
    _retry_after.clear()


def get_mongodb_client(mongo_url: str | None) -> MongoClient | None:
    """Get MongoDB client with connection caching and reconnection logic.

    Connection strategy:
    1. Return cached client if healthy (ping succeeds)
    2. If cached client fails, attempt reconnection
    3. After a failed attempt, wait RETRY_COOLDOWN_SECONDS before trying that URL again

    Returns:
        MongoDB client or None if connection fails
    """
    global _client_cache

    if _client_cache:
        try:
            _client_cache.admin.command('ping')
            return _client_cache
        except PyMongoError:
            _client_cache = None
            logger.debug("[MONGODB] Cached client failed ping, attempting reconnection...")

    if not mongo_url:
        logger.error("[MONGODB] MONGO_URL not configured.")
        return None

    if monotonic() < _retry_after.get(mongo_url, 0.0):
        return None

    try:
        client = MongoClient(
            mongo_url,
            serverSelectionTimeoutMS=5000,
            connectTimeoutMS=5000,
            socketTimeoutMS=30000,
            maxPoolSize=10,
            minPoolSize=0,
            maxIdleTimeMS=30000,
            waitQueueTimeoutMS=10000,
            retryWrites=True,
            retryReads=True,
            tz_aware=True,
        )
        client.admin.command('ping')
    except (ConnectionFailure, PyMongoError) as e:
        logger.error(f"[MONGODB] Connection failed: {str(e)[:200]}")
        _retry_after[mongo_url] = monotonic() + RETRY_COOLDOWN_SECONDS
        return None

    _retry_after.pop(mongo_url, None)
    if _client_cache is None:
        logger.info("[MONGODB] Connected successfully")
    _client_cache = client
    return client
