"""Site repository implementation.

SQLAlchemy implementation of the SiteRepository protocol.
"""

from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.site import Site
from src.infrastructure.persistence.models.site import Site as SiteModel


class SiteRepository:
    """SQLAlchemy implementation of SiteRepository protocol."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self._session = session

    async def count(self) -> int:
        """Count stored sites.

        Returns:
            Number of sites.
        """
        stmt = select(func.count()).select_from(SiteModel)
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def create(self, site: Site) -> None:
        """Insert a new site, keeping its id.

        Args:
            site: Site to insert.
        """
        self._session.add(self._to_model(site))
        await self._session.flush()

    async def find_by_id(self, site_id: UUID) -> Site | None:
        """Find site by ID.

        Args:
            site_id: Site identifier.

        Returns:
            Site if found, None otherwise.
        """
        stmt = select(SiteModel).where(SiteModel.id == site_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_entity(model)

    async def find_server_admin_site(self) -> Site | None:
        """Find the oldest server admin site.

        Returns:
            Site if one is flagged, None otherwise.
        """
        stmt = (
            select(SiteModel)
            .where(SiteModel.is_server_admin_site.is_(True))
            .order_by(SiteModel.created_at, SiteModel.id)
            .limit(1)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model is not None else None

    async def find_first(self) -> Site | None:
        """Find the oldest site.

        Returns:
            Oldest site, or None when no site exists.
        """
        stmt = select(SiteModel).order_by(SiteModel.created_at, SiteModel.id).limit(1)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model is not None else None

    def _to_entity(self, model: SiteModel) -> Site:
        """Map database model to domain entity.

        Args:
            model: Database model.

        Returns:
            Domain entity.
        """
        return Site(
            id=model.id,
            alias_id=model.alias_id,
            site_name=model.site_name,
            is_server_admin_site=model.is_server_admin_site,
            theme=model.theme,
            created_at=model.created_at,
        )

    def _to_model(self, entity: Site) -> SiteModel:
        """Map domain entity to database model.

        Args:
            entity: Domain entity.

        Returns:
            Database model.
        """
        return SiteModel(
            id=entity.id,
            alias_id=entity.alias_id,
            site_name=entity.site_name,
            is_server_admin_site=entity.is_server_admin_site,
            theme=entity.theme,
            created_at=entity.created_at,
        )
