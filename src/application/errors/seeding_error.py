"""Seeding errors.

Raised by the data seeder when an invariant the seeding sequence depends on
cannot be met. Persistence failures are not wrapped: they propagate as raised
by the store.
"""


class SeedingError(Exception):
    """Base exception for initial data seeding.

    Attributes:
        step: Seeding step that failed (e.g., "roles", "admin_user").
    """

    def __init__(self, message: str, *, step: str) -> None:
        """Initialize error.

        Args:
            message: Human-readable message.
            step: Seeding step that failed.
        """
        super().__init__(message)
        self.step = step


class SiteResolutionError(SeedingError):
    """No site is available to own the roles or the admin user."""


class TenantResolutionError(SeedingError):
    """The tenant resolver could not determine a tenant id."""
