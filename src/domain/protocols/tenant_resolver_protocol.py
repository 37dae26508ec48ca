"""Tenant resolver protocol.

Maps the current execution context to the tenant id that scopes role and
user counts. At startup there is no request, so implementations derive the
tenant from configuration or from the store.
"""

from typing import Protocol


class TenantResolver(Protocol):
    """Protocol for resolving the current tenant id."""

    async def resolve_tenant_id(self) -> str | None:
        """Resolve the current tenant.

        Returns:
            Tenant identifier, or None when no tenant can be determined.
        """
        ...
