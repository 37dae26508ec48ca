"""Repository dependency factories.

Scoped repository sets for the seeding run. Each factory returns the four
repositories the seeder needs, bound to one persistence scope (a database
session or a Redis client).
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncSession

if TYPE_CHECKING:
    from redis.asyncio import Redis

    from src.domain.protocols import (
        GeographyRepository,
        RoleRepository,
        SiteRepository,
        UserRepository,
    )
    from src.infrastructure.documents import DocumentKeys


@dataclass(frozen=True, slots=True)
class SeedingRepositories:
    """Repositories sharing one persistence scope."""

    geography: "GeographyRepository"
    sites: "SiteRepository"
    users: "UserRepository"
    roles: "RoleRepository"


# ============================================================================
# Repository Factories (Scoped)
# ============================================================================


def get_relational_repositories(session: AsyncSession) -> SeedingRepositories:
    """Build SQLAlchemy repositories sharing one session.

    Args:
        session: Database session for the scope duration.

    Returns:
        SeedingRepositories backed by the relational store.

    Usage:
        async with get_database().get_session() as session:
            repos = get_relational_repositories(session)
            await repos.sites.count()
    """
    from src.infrastructure.persistence.repositories import (
        GeographyRepository,
        RoleRepository,
        SiteRepository,
        UserRepository,
    )

    return SeedingRepositories(
        geography=GeographyRepository(session=session),
        sites=SiteRepository(session=session),
        users=UserRepository(session=session),
        roles=RoleRepository(session=session),
    )


def get_document_repositories(
    redis_client: "Redis", keys: "DocumentKeys"
) -> SeedingRepositories:
    """Build Redis repositories sharing one client.

    Args:
        redis_client: Async Redis client for the scope duration.
        keys: Document key builder.

    Returns:
        SeedingRepositories backed by the document store.
    """
    from src.infrastructure.documents import (
        RedisGeographyRepository,
        RedisRoleRepository,
        RedisSiteRepository,
        RedisUserRepository,
    )

    return SeedingRepositories(
        geography=RedisGeographyRepository(redis_client, keys),
        sites=RedisSiteRepository(redis_client, keys),
        users=RedisUserRepository(redis_client, keys),
        roles=RedisRoleRepository(redis_client, keys),
    )
