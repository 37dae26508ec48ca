"""Role repository protocol.

Read-side counting of roles per tenant. Role writes go through
UserRepository, which also owns role membership.
"""

from typing import Protocol


class RoleRepository(Protocol):
    """Protocol for tenant-scoped role counts."""

    async def count_by_tenant(self, tenant_id: str) -> int:
        """Count roles belonging to a tenant.

        Args:
            tenant_id: Tenant identifier (string form of the site id).

        Returns:
            Number of roles for the tenant. Unknown tenants count as 0.
        """
        ...
