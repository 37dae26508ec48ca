"""Tenant resolvers.

At application startup there is no request to derive a tenant from, so the
tenant that scopes role and user counts comes either from configuration or
from the site already stored.

Both resolvers implement TenantResolver structurally.
"""

from src.domain.protocols.site_repository import SiteRepository


class StaticTenantResolver:
    """Resolve to a fixed, configured tenant id.

    Example:
        >>> resolver = StaticTenantResolver(settings.tenant_id)
        >>> await resolver.resolve_tenant_id()
        '0192f1c4-...'
    """

    def __init__(self, tenant_id: str) -> None:
        """Initialize resolver.

        Args:
            tenant_id: Tenant id to return.

        Raises:
            ValueError: If tenant_id is empty.
        """
        if not tenant_id:
            raise ValueError("tenant_id cannot be empty")
        self._tenant_id = tenant_id

    async def resolve_tenant_id(self) -> str | None:
        """Return the configured tenant id.

        Returns:
            The configured tenant id.
        """
        return self._tenant_id


class SiteTenantResolver:
    """Resolve the tenant from the sites in the store.

    Prefers the server admin site, then falls back to the oldest site.
    Queries on every call, so a site created earlier in the same run is seen.
    """

    def __init__(self, site_repo: SiteRepository) -> None:
        """Initialize resolver.

        Args:
            site_repo: Site repository to query.
        """
        self._site_repo = site_repo

    async def resolve_tenant_id(self) -> str | None:
        """Resolve the current tenant id.

        Returns:
            Tenant id of the server admin (or oldest) site, None if no site exists.
        """
        site = await self._site_repo.find_server_admin_site()
        if site is None:
            site = await self._site_repo.find_first()
        if site is None:
            return None
        return site.tenant_id
