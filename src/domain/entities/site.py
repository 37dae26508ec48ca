"""Site domain entity.

A site is the tenant root: roles and users belong to exactly one site, and the
tenant id used to scope counts is the string form of the site id.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID


@dataclass
class Site:
    """Tenant root entity.

    Attributes:
        id: Unique site identifier (assigned when the site is built).
        alias_id: Short human-readable alias (e.g., "s1").
        site_name: Display name.
        is_server_admin_site: True for the site that administers the server.
        theme: Optional theme name.
        created_at: When the site was created.

    Example:
        >>> site = Site(id=uuid7(), alias_id="s1", site_name="Sample Site")
        >>> site.tenant_id == str(site.id)
        True
    """

    id: UUID
    alias_id: str
    site_name: str
    is_server_admin_site: bool = False
    theme: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Validate site after initialization.

        Raises:
            ValueError: If alias or name is empty or too long.
        """
        if not self.alias_id:
            raise ValueError("Site alias_id cannot be empty")

        if len(self.alias_id) > 36:
            raise ValueError("Site alias_id cannot exceed 36 characters")

        if not self.site_name:
            raise ValueError("Site name cannot be empty")

        if len(self.site_name) > 255:
            raise ValueError("Site name cannot exceed 255 characters")

    @property
    def tenant_id(self) -> str:
        """Tenant identifier used to scope role and user counts.

        Returns:
            str: String form of the site id.
        """
        return str(self.id)


def site_id_from_tenant(tenant_id: str) -> UUID | None:
    """Parse a tenant id back into the owning site id.

    Args:
        tenant_id: Tenant identifier.

    Returns:
        Site UUID, or None if tenant_id is not a UUID string.
    """
    try:
        return UUID(tenant_id)
    except (TypeError, ValueError, AttributeError):
        return None
