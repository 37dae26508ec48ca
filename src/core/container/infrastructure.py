"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Database (SQLAlchemy async, relational backend)
- Redis client and key builder (document backend)
- Password hashing (bcrypt)
- Logging (structlog console/JSON)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import settings
from src.core.enums import Environment
from src.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from redis.asyncio import Redis

    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
    from src.infrastructure.documents import DocumentKeys


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Returns Database instance with connection pool.
    Use Database.get_session() for a transactional session scope.

    Returns:
        Database manager instance.
    """
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


def get_redis_client() -> "Redis":
    """Create a Redis client for one document-store scope.

    Not cached: the caller owns the client and must close it with
    ``await client.aclose()``.

    Returns:
        Async Redis client decoding responses to str.
    """
    from redis.asyncio import Redis

    return Redis.from_url(
        settings.redis_url,
        decode_responses=True,
        socket_connect_timeout=5,
        socket_timeout=5,
        retry_on_timeout=True,
    )


@lru_cache()
def get_document_keys() -> "DocumentKeys":
    """Get document key builder singleton (app-scoped).

    Returns:
        DocumentKeys using settings.redis_key_prefix.
    """
    from src.infrastructure.documents import DocumentKeys

    return DocumentKeys(prefix=settings.redis_key_prefix)


# ============================================================================
# Security Services (Application-Scoped)
# ============================================================================


@lru_cache()
def get_password_service() -> "PasswordHashingProtocol":
    """Get password hashing service singleton (app-scoped).

    Returns BcryptPasswordService with the cost factor from
    settings.bcrypt_rounds.

    Returns:
        Password hashing service implementing PasswordHashingProtocol.
    """
    from src.infrastructure.security import BcryptPasswordService

    return BcryptPasswordService(cost_factor=settings.bcrypt_rounds)


# ============================================================================
# Logging (Application-Scoped)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    use_json = settings.environment != Environment.DEVELOPMENT
    level = "DEBUG" if settings.debug else settings.log_level
    return ConsoleAdapter(
        use_json=use_json,
        level=level,
        app=settings.app_name,
        environment=settings.environment.value,
    )
