"""Application layer errors.

Exports:
    SeedingError: Base error for initial data seeding
    SiteResolutionError: No site available for roles/users
    TenantResolutionError: Tenant id could not be resolved
"""

from src.application.errors.seeding_error import (
    SeedingError,
    SiteResolutionError,
    TenantResolutionError,
)

__all__ = [
    "SeedingError",
    "SiteResolutionError",
    "TenantResolutionError",
]
