"""Application services.

Services that support use cases without being command or query handlers.
"""

from src.application.services.tenant_resolvers import (
    SiteTenantResolver,
    StaticTenantResolver,
)

__all__ = ["SiteTenantResolver", "StaticTenantResolver"]
