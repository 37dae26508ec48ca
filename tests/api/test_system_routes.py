"""API tests for system routes and the application lifespan.

Validates root and health endpoints, and that startup seeding runs (or is
skipped) according to settings.seed_on_startup.
"""

from unittest.mock import AsyncMock, Mock, patch

import pytest
from fastapi.testclient import TestClient

from src.application.errors import SiteResolutionError
from src.application.seeding import SeedReport
from src.core.config import settings
from src.main import app


@pytest.fixture
def mock_database():
    database = Mock()
    database.close = AsyncMock()
    with patch("src.core.container.get_database", return_value=database):
        yield database


@pytest.fixture
def mock_ensure_initial_data():
    with patch(
        "src.core.container.ensure_initial_data",
        new=AsyncMock(return_value=SeedReport(sites=1, roles=4, users=1)),
    ) as ensure:
        yield ensure


def test_root_endpoint_returns_status_and_version(
    mock_database, mock_ensure_initial_data
) -> None:
    """Root endpoint should return operational status and app version."""
    with TestClient(app) as client:
        response = client.get("/")

    assert response.status_code == 200
    data = response.json()

    assert data["message"] == settings.app_name
    assert data["status"] == "operational"
    assert data["version"] == settings.app_version


def test_health_endpoint_reports_storage_backend(
    mock_database, mock_ensure_initial_data
) -> None:
    """Health endpoint should return healthy status and the active backend."""
    with TestClient(app) as client:
        response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {
        "status": "healthy",
        "storage_backend": settings.storage_backend.value,
    }


def test_startup_seeds_initial_data(mock_database, mock_ensure_initial_data) -> None:
    """Startup should seed once and keep the report on app state."""
    with patch.object(settings, "seed_on_startup", True):
        with TestClient(app):
            mock_ensure_initial_data.assert_awaited_once()
            assert app.state.seed_report.sites == 1

    mock_database.close.assert_awaited_once()


def test_startup_skips_seeding_when_disabled(
    mock_database, mock_ensure_initial_data
) -> None:
    """Startup should not touch the store when seeding is disabled."""
    with patch.object(settings, "seed_on_startup", False):
        with TestClient(app):
            pass

    mock_ensure_initial_data.assert_not_awaited()


def test_startup_fails_when_seeding_fails(mock_database) -> None:
    """A seeding error should abort startup and still dispose the pool."""
    with (
        patch.object(settings, "seed_on_startup", True),
        patch(
            "src.core.container.ensure_initial_data",
            new=AsyncMock(side_effect=SiteResolutionError("no site", step="roles")),
        ),
    ):
        with pytest.raises(SiteResolutionError):
            with TestClient(app):
                pass

    mock_database.close.assert_awaited_once()
