"""Unit tests for seeding composition in the container.

Tests cover:
- Backend selection from settings.storage_backend
- Persistence scope released on success and failure
- Tenant resolver selection (configured vs site-derived)
- Failure logging and re-raise

Architecture:
- Unit tests with patched container factories
- No database or Redis connections
"""

from contextlib import asynccontextmanager
from unittest.mock import AsyncMock, MagicMock, Mock, patch

import pytest

from src.application.errors import SiteResolutionError
from src.application.seeding import SeedReport
from src.application.services import SiteTenantResolver, StaticTenantResolver
from src.core.container import (
    SeedingRepositories,
    ensure_initial_data,
    get_tenant_resolver,
)
from src.core.enums import StorageBackend

MODULE = "src.core.container.seeding"


def create_repos() -> SeedingRepositories:
    return SeedingRepositories(
        geography=AsyncMock(),
        sites=AsyncMock(),
        users=AsyncMock(),
        roles=AsyncMock(),
    )


def create_database(session):
    """Database double whose get_session() yields the given session."""
    database = Mock()
    database.exited = False
    database.error = None

    @asynccontextmanager
    async def get_session():
        try:
            yield session
        except BaseException as e:
            database.error = e
            raise
        finally:
            database.exited = True

    database.get_session = get_session
    return database


@pytest.fixture
def mock_settings():
    with patch(f"{MODULE}.settings") as settings:
        settings.storage_backend = StorageBackend.RELATIONAL
        settings.tenant_id = None
        settings.admin_email = "admin@admin.com"
        settings.admin_user_name = "admin"
        settings.admin_initial_password = "admin"
        yield settings


@pytest.fixture
def patched_logger(mock_logger):
    with patch(f"{MODULE}.get_logger", return_value=mock_logger):
        yield mock_logger


@pytest.mark.unit
class TestGetTenantResolver:
    """Test tenant resolver selection."""

    def test_configured_tenant_uses_static_resolver(self, mock_settings):
        """Test settings.tenant_id wins."""
        mock_settings.tenant_id = "tenant-9"

        resolver = get_tenant_resolver(create_repos())

        assert isinstance(resolver, StaticTenantResolver)

    def test_default_uses_site_resolver(self, mock_settings):
        """Test the site store resolves the tenant when none is configured."""
        resolver = get_tenant_resolver(create_repos())

        assert isinstance(resolver, SiteTenantResolver)


@pytest.mark.unit
class TestContainerExports:
    """Test the container exposes only the seeding graph factories."""

    def test_public_factories(self):
        """Test the re-exported names."""
        import src.core.container as container

        assert set(container.__all__) == {
            "get_database",
            "get_redis_client",
            "get_document_keys",
            "get_password_service",
            "get_logger",
            "SeedingRepositories",
            "get_relational_repositories",
            "get_document_repositories",
            "ensure_initial_data",
            "get_data_seeder",
            "get_tenant_resolver",
        }
        assert not hasattr(container, "get_db_session")


@pytest.mark.unit
class TestEnsureInitialData:
    """Test ensure_initial_data() composition."""

    @pytest.mark.asyncio
    async def test_relational_backend_runs_in_one_session(
        self, mock_settings, patched_logger
    ):
        """Test repositories share the session and the scope is closed."""
        session = Mock()
        database = create_database(session)
        repos = create_repos()
        report = SeedReport(sites=1)
        seeder = Mock()
        seeder.run = AsyncMock(return_value=report)

        with (
            patch(f"{MODULE}.get_database", return_value=database),
            patch(
                f"{MODULE}.get_relational_repositories", return_value=repos
            ) as mock_repos,
            patch(f"{MODULE}.get_data_seeder", return_value=seeder) as mock_seeder,
        ):
            result = await ensure_initial_data()

        assert result is report
        mock_repos.assert_called_once_with(session)
        mock_seeder.assert_called_once_with(repos)
        assert database.exited is True
        assert database.error is None

    @pytest.mark.asyncio
    async def test_document_backend_closes_client(self, mock_settings, patched_logger):
        """Test the Redis client is closed after a successful run."""
        mock_settings.storage_backend = StorageBackend.DOCUMENT
        redis_client = MagicMock()
        redis_client.aclose = AsyncMock()
        keys = Mock()
        seeder = Mock()
        seeder.run = AsyncMock(return_value=SeedReport())

        with (
            patch(f"{MODULE}.get_redis_client", return_value=redis_client),
            patch(f"{MODULE}.get_document_keys", return_value=keys),
            patch(
                f"{MODULE}.get_document_repositories", return_value=create_repos()
            ) as mock_repos,
            patch(f"{MODULE}.get_data_seeder", return_value=seeder),
            patch(f"{MODULE}.get_database") as mock_database,
        ):
            await ensure_initial_data()

        mock_repos.assert_called_once_with(redis_client, keys)
        redis_client.aclose.assert_awaited_once()
        mock_database.assert_not_called()

    @pytest.mark.asyncio
    async def test_document_backend_closes_client_on_failure(
        self, mock_settings, patched_logger
    ):
        """Test the Redis client is closed when seeding fails."""
        mock_settings.storage_backend = StorageBackend.DOCUMENT
        redis_client = MagicMock()
        redis_client.aclose = AsyncMock()
        seeder = Mock()
        seeder.run = AsyncMock(side_effect=ConnectionError("redis down"))

        with (
            patch(f"{MODULE}.get_redis_client", return_value=redis_client),
            patch(f"{MODULE}.get_document_keys"),
            patch(f"{MODULE}.get_document_repositories", return_value=create_repos()),
            patch(f"{MODULE}.get_data_seeder", return_value=seeder),
        ):
            with pytest.raises(ConnectionError):
                await ensure_initial_data()

        redis_client.aclose.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_failure_is_logged_and_reraised(self, mock_settings, patched_logger):
        """Test seeding errors are logged at ERROR and propagate."""
        database = create_database(Mock())
        error = SiteResolutionError("no site", step="roles")
        seeder = Mock()
        seeder.run = AsyncMock(side_effect=error)

        with (
            patch(f"{MODULE}.get_database", return_value=database),
            patch(f"{MODULE}.get_relational_repositories", return_value=create_repos()),
            patch(f"{MODULE}.get_data_seeder", return_value=seeder),
        ):
            with pytest.raises(SiteResolutionError) as exc_info:
                await ensure_initial_data()

        assert exc_info.value is error
        assert database.error is error
        patched_logger.error.assert_called_once()
        call = patched_logger.error.call_args
        assert call.args[0] == "initial_data_failed"
        assert call.kwargs["error"] is error
