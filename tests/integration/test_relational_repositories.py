"""Integration tests for the SQLAlchemy repositories.

Tests cover:
- Geography counts, inserts and currency listing
- Site creation and server-admin / oldest-site lookups
- Tenant-scoped role and user counts
- Role lookup by name and role membership

Architecture:
- Integration tests with a REAL SQLite database (aiosqlite, temp file)
- Uses test_database fixture (fresh file per test)
- Separate sessions to verify committed state
"""

from datetime import UTC, datetime, timedelta

import pytest
from uuid_extensions import uuid7

from src.domain.entities import Currency, GeoCountry, GeoZone, Language, Role, Site, User
from src.infrastructure.persistence.repositories import (
    GeographyRepository,
    RoleRepository,
    SiteRepository,
    UserRepository,
)


def create_test_site(
    alias_id="s1",
    is_server_admin_site=False,
    created_at=None,
):
    """Create a test Site with all required fields."""
    return Site(
        id=uuid7(),
        alias_id=alias_id,
        site_name=f"Site {alias_id}",
        is_server_admin_site=is_server_admin_site,
        created_at=created_at or datetime.now(UTC),
    )


def create_test_user(site_id, email="admin@admin.com", user_name="admin"):
    """Create a test User bound to a site."""
    return User(
        id=uuid7(),
        site_id=site_id,
        email=email,
        user_name=user_name,
        display_name="Admin",
        password_hash="$2b$10$hash",
        must_change_password=True,
    )


@pytest.mark.integration
class TestGeographyRepository:
    """Test GeographyRepository against SQLite."""

    @pytest.mark.asyncio
    async def test_empty_store_counts_zero(self, test_database):
        """Test every count is zero on a fresh database."""
        async with test_database.get_session() as session:
            repo = GeographyRepository(session=session)

            assert await repo.count_countries() == 0
            assert await repo.count_zones() == 0
            assert await repo.count_languages() == 0
            assert await repo.count_currencies() == 0
            assert await repo.list_currencies() == []

    @pytest.mark.asyncio
    async def test_added_records_are_counted(self, test_database):
        """Test inserted records persist and are counted."""
        async with test_database.get_session() as session:
            repo = GeographyRepository(session=session)
            await repo.add_country(
                GeoCountry(id=uuid7(), name="Canada", iso_code2="CA", iso_code3="CAN")
            )
            await repo.add_zone(
                GeoZone(id=uuid7(), country_code="CA", name="Ontario", code="ON")
            )
            await repo.add_language(Language(id=uuid7(), name="French", code="fr"))

        async with test_database.get_session() as session:
            repo = GeographyRepository(session=session)

            assert await repo.count_countries() == 1
            assert await repo.count_zones() == 1
            assert await repo.count_languages() == 1

    @pytest.mark.asyncio
    async def test_list_currencies_ordered_by_code(self, test_database):
        """Test currencies round-trip and come back ordered by code."""
        async with test_database.get_session() as session:
            repo = GeographyRepository(session=session)
            await repo.add_currency(
                Currency(id=uuid7(), code="USD", name="US Dollar", symbol="$")
            )
            await repo.add_currency(
                Currency(
                    id=uuid7(),
                    code="EUR",
                    name="Euro",
                    symbol="€",
                    culture_code="fr-FR",
                )
            )

        async with test_database.get_session() as session:
            currencies = await GeographyRepository(session=session).list_currencies()

        assert [c.code for c in currencies] == ["EUR", "USD"]
        assert currencies[0].symbol == "€"
        assert currencies[0].culture_code == "fr-FR"


@pytest.mark.integration
class TestSiteRepository:
    """Test SiteRepository against SQLite."""

    @pytest.mark.asyncio
    async def test_create_keeps_id(self, test_database):
        """Test the entity id is the stored primary key."""
        site = create_test_site(is_server_admin_site=True)

        async with test_database.get_session() as session:
            await SiteRepository(session=session).create(site)

        async with test_database.get_session() as session:
            repo = SiteRepository(session=session)
            found = await repo.find_by_id(site.id)

            assert await repo.count() == 1
            assert found is not None
            assert found.id == site.id
            assert found.alias_id == "s1"
            assert found.is_server_admin_site is True

    @pytest.mark.asyncio
    async def test_find_by_id_missing(self, test_database):
        """Test unknown ids return None."""
        async with test_database.get_session() as session:
            assert await SiteRepository(session=session).find_by_id(uuid7()) is None

    @pytest.mark.asyncio
    async def test_find_server_admin_site(self, test_database):
        """Test the server admin site is found among others."""
        regular = create_test_site(alias_id="s2")
        admin = create_test_site(alias_id="s1", is_server_admin_site=True)

        async with test_database.get_session() as session:
            repo = SiteRepository(session=session)
            await repo.create(regular)
            await repo.create(admin)

        async with test_database.get_session() as session:
            found = await SiteRepository(session=session).find_server_admin_site()

        assert found is not None
        assert found.id == admin.id

    @pytest.mark.asyncio
    async def test_find_first_returns_oldest(self, test_database):
        """Test find_first() orders by creation time."""
        now = datetime.now(UTC)
        newer = create_test_site(alias_id="new", created_at=now)
        older = create_test_site(alias_id="old", created_at=now - timedelta(days=1))

        async with test_database.get_session() as session:
            repo = SiteRepository(session=session)
            await repo.create(newer)
            await repo.create(older)

        async with test_database.get_session() as session:
            repo = SiteRepository(session=session)

            assert (await repo.find_first()).id == older.id
            assert await repo.find_server_admin_site() is None


@pytest.mark.integration
class TestUserAndRoleRepositories:
    """Test UserRepository and RoleRepository against SQLite."""

    @pytest.mark.asyncio
    async def test_counts_are_scoped_by_tenant(self, test_database):
        """Test roles and users of one site do not count for another."""
        site = create_test_site(is_server_admin_site=True)
        other = create_test_site(alias_id="s2")

        async with test_database.get_session() as session:
            await SiteRepository(session=session).create(site)
            await SiteRepository(session=session).create(other)
            users = UserRepository(session=session)
            await users.create_role(
                Role(id=uuid7(), site_id=site.id, role_name="Administrators")
            )
            await users.create(create_test_user(site.id))

        async with test_database.get_session() as session:
            roles = RoleRepository(session=session)
            users = UserRepository(session=session)

            assert await roles.count_by_tenant(site.tenant_id) == 1
            assert await users.count_by_tenant(site.tenant_id) == 1
            assert await roles.count_by_tenant(other.tenant_id) == 0
            assert await users.count_by_tenant(other.tenant_id) == 0

    @pytest.mark.asyncio
    async def test_non_uuid_tenant_counts_zero(self, test_database):
        """Test tenant ids that are not site ids match nothing."""
        async with test_database.get_session() as session:
            assert await RoleRepository(session=session).count_by_tenant("tenant-1") == 0
            assert await UserRepository(session=session).count_by_tenant("tenant-1") == 0

    @pytest.mark.asyncio
    async def test_fetch_role_is_case_insensitive(self, test_database):
        """Test role lookup matches normalized names within the site."""
        site = create_test_site()
        other = create_test_site(alias_id="s2")
        role = Role(id=uuid7(), site_id=site.id, role_name="Authenticated Users")

        async with test_database.get_session() as session:
            await SiteRepository(session=session).create(site)
            await SiteRepository(session=session).create(other)
            await UserRepository(session=session).create_role(role)

        async with test_database.get_session() as session:
            repo = UserRepository(session=session)
            found = await repo.fetch_role(site.id, "authenticated users")

            assert found is not None
            assert found.id == role.id
            assert found.site_id == site.id
            assert await repo.fetch_role(other.id, "Authenticated Users") is None
            assert await repo.fetch_role(site.id, "Administrators") is None

    @pytest.mark.asyncio
    async def test_create_requires_site(self, test_database):
        """Test users and roles without a site are rejected."""
        async with test_database.get_session() as session:
            repo = UserRepository(session=session)

            with pytest.raises(ValueError, match="site"):
                await repo.create(create_test_user(None))
            with pytest.raises(ValueError, match="site"):
                await repo.create_role(
                    Role(id=uuid7(), site_id=None, role_name="Administrators")
                )

    @pytest.mark.asyncio
    async def test_role_membership(self, test_database):
        """Test memberships are listed by role name and not duplicated."""
        site = create_test_site()
        admins = Role(id=uuid7(), site_id=site.id, role_name="Administrators")
        members = Role(id=uuid7(), site_id=site.id, role_name="Authenticated Users")
        user = create_test_user(site.id)

        async with test_database.get_session() as session:
            await SiteRepository(session=session).create(site)
            repo = UserRepository(session=session)
            await repo.create_role(members)
            await repo.create_role(admins)
            await repo.create(user)
            await repo.add_user_to_role(members.id, user.id)
            await repo.add_user_to_role(admins.id, user.id)
            await repo.add_user_to_role(admins.id, user.id)

        async with test_database.get_session() as session:
            roles = await UserRepository(session=session).list_roles_for_user(user.id)

        assert [role.role_name for role in roles] == [
            "Administrators",
            "Authenticated Users",
        ]
