"""Seeding composition.

Wires the DataSeeder graph for one run: picks the storage backend from
settings, opens a single persistence scope, builds the repositories and the
tenant resolver on that scope, runs the seeder and releases the scope on
every exit path.
"""

from src.application.seeding import DataSeeder, SeedReport
from src.application.services import SiteTenantResolver, StaticTenantResolver
from src.core.config import settings
from src.core.container.infrastructure import (
    get_database,
    get_document_keys,
    get_logger,
    get_password_service,
    get_redis_client,
)
from src.core.container.repositories import (
    SeedingRepositories,
    get_document_repositories,
    get_relational_repositories,
)
from src.core.enums import StorageBackend
from src.domain.protocols import TenantResolver


def get_tenant_resolver(repos: SeedingRepositories) -> TenantResolver:
    """Choose the tenant resolver.

    A configured settings.tenant_id wins; otherwise the tenant is the server
    admin site found through the scoped site repository.

    Args:
        repos: Repositories of the current scope.

    Returns:
        TenantResolver implementation.
    """
    if settings.tenant_id:
        return StaticTenantResolver(settings.tenant_id)
    return SiteTenantResolver(repos.sites)


def get_data_seeder(repos: SeedingRepositories) -> DataSeeder:
    """Build a DataSeeder on one repository scope.

    Args:
        repos: Repositories of the current scope.

    Returns:
        DataSeeder with admin credentials from settings.
    """
    return DataSeeder(
        geo_repo=repos.geography,
        site_repo=repos.sites,
        user_repo=repos.users,
        role_repo=repos.roles,
        tenant_resolver=get_tenant_resolver(repos),
        password_service=get_password_service(),
        logger=get_logger(),
        admin_email=settings.admin_email,
        admin_user_name=settings.admin_user_name,
        admin_password=settings.admin_initial_password,
    )


async def ensure_initial_data() -> SeedReport:
    """Seed baseline data into the configured store when it is absent.

    Relational: one session, committed on success and rolled back on error.
    Document: one Redis client, closed on every exit path.

    Returns:
        SeedReport of the run.

    Raises:
        SeedingError: Site or tenant could not be resolved.
        Exception: Persistence errors propagate unchanged.

    Usage:
        # Application startup (lifespan)
        report = await ensure_initial_data()
    """
    logger = get_logger()
    backend = settings.storage_backend

    try:
        if backend == StorageBackend.DOCUMENT:
            redis_client = get_redis_client()
            try:
                repos = get_document_repositories(redis_client, get_document_keys())
                report = await get_data_seeder(repos).run()
            finally:
                await redis_client.aclose()
        else:
            async with get_database().get_session() as session:
                repos = get_relational_repositories(session)
                report = await get_data_seeder(repos).run()
    except Exception as e:
        logger.error(
            "initial_data_failed",
            error=e,
            storage_backend=backend.value,
        )
        raise

    logger.info(
        "initial_data_ensured",
        storage_backend=backend.value,
        seeded_anything=report.seeded_anything,
    )
    return report
