"""Container module - Centralized dependency injection.

This module re-exports all factory functions from submodules:

    from src.core.container import ensure_initial_data, get_logger, ...

The container is organized into modules:
- infrastructure: Core services (database, redis, logging, password hashing)
- repositories: Scoped repository sets for each storage backend
- seeding: DataSeeder wiring and the ensure_initial_data entry point
"""

# Infrastructure services
from src.core.container.infrastructure import (
    get_database,
    get_document_keys,
    get_logger,
    get_password_service,
    get_redis_client,
)

# Repositories
from src.core.container.repositories import (
    SeedingRepositories,
    get_document_repositories,
    get_relational_repositories,
)

# Seeding
from src.core.container.seeding import (
    ensure_initial_data,
    get_data_seeder,
    get_tenant_resolver,
)

__all__ = [
    # Infrastructure
    "get_database",
    "get_redis_client",
    "get_document_keys",
    "get_password_service",
    "get_logger",
    # Repositories
    "SeedingRepositories",
    "get_relational_repositories",
    "get_document_repositories",
    # Seeding
    "ensure_initial_data",
    "get_data_seeder",
    "get_tenant_resolver",
]
