"""Role repository implementation.

SQLAlchemy implementation of the RoleRepository protocol (tenant counts).
"""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.site import site_id_from_tenant
from src.infrastructure.persistence.models.role import Role as RoleModel


class RoleRepository:
    """SQLAlchemy implementation of RoleRepository protocol."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self._session = session

    async def count_by_tenant(self, tenant_id: str) -> int:
        """Count roles of a tenant.

        Args:
            tenant_id: Tenant identifier (site id string).

        Returns:
            Number of roles; 0 when tenant_id is not a site id.
        """
        site_id = site_id_from_tenant(tenant_id)
        if site_id is None:
            return 0

        stmt = (
            select(func.count())
            .select_from(RoleModel)
            .where(RoleModel.site_id == site_id)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one()
