"""Unit tests for tenant resolvers.

Tests cover:
- StaticTenantResolver returns the configured id
- SiteTenantResolver prefers the server admin site
- SiteTenantResolver falls back to the oldest site, then None
"""

from unittest.mock import AsyncMock

import pytest
from uuid_extensions import uuid7

from src.application.services import SiteTenantResolver, StaticTenantResolver
from src.domain.entities.site import Site
from src.domain.protocols import SiteRepository


def create_site(is_server_admin_site: bool) -> Site:
    return Site(
        id=uuid7(),
        alias_id="s1",
        site_name="Sample Site",
        is_server_admin_site=is_server_admin_site,
    )


@pytest.mark.unit
class TestStaticTenantResolver:
    """Test StaticTenantResolver."""

    @pytest.mark.asyncio
    async def test_returns_configured_tenant(self):
        """Test the configured id is returned unchanged."""
        resolver = StaticTenantResolver("tenant-7")

        assert await resolver.resolve_tenant_id() == "tenant-7"

    def test_rejects_empty_tenant(self):
        """Test an empty id is a configuration error."""
        with pytest.raises(ValueError, match="tenant_id"):
            StaticTenantResolver("")


@pytest.mark.unit
class TestSiteTenantResolver:
    """Test SiteTenantResolver."""

    @pytest.mark.asyncio
    async def test_prefers_server_admin_site(self):
        """Test the server admin site is the tenant."""
        site = create_site(is_server_admin_site=True)
        site_repo = AsyncMock(spec=SiteRepository)
        site_repo.find_server_admin_site.return_value = site

        tenant_id = await SiteTenantResolver(site_repo).resolve_tenant_id()

        assert tenant_id == str(site.id)
        site_repo.find_first.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_falls_back_to_oldest_site(self):
        """Test the oldest site is used without a server admin site."""
        site = create_site(is_server_admin_site=False)
        site_repo = AsyncMock(spec=SiteRepository)
        site_repo.find_server_admin_site.return_value = None
        site_repo.find_first.return_value = site

        tenant_id = await SiteTenantResolver(site_repo).resolve_tenant_id()

        assert tenant_id == site.tenant_id

    @pytest.mark.asyncio
    async def test_no_site_resolves_to_none(self):
        """Test an empty store has no tenant."""
        site_repo = AsyncMock(spec=SiteRepository)
        site_repo.find_server_admin_site.return_value = None
        site_repo.find_first.return_value = None

        assert await SiteTenantResolver(site_repo).resolve_tenant_id() is None
