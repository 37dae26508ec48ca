"""User repository implementation.

SQLAlchemy implementation of the UserRepository protocol.
Maps between User/Role domain entities and the site_users, site_roles and
site_user_roles tables.
"""

from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.role import Role
from src.domain.entities.site import site_id_from_tenant
from src.domain.entities.user import User
from src.infrastructure.persistence.models.role import Role as RoleModel
from src.infrastructure.persistence.models.user import User as UserModel
from src.infrastructure.persistence.models.user_role import UserRole as UserRoleModel


class UserRepository:
    """SQLAlchemy implementation of UserRepository protocol.

    **Implementation Notes**:
    - Role lookups match on normalized (upper-cased) names
    - Membership inserts are skipped when the pair already exists
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self._session = session

    async def count_by_tenant(self, tenant_id: str) -> int:
        """Count users of a tenant.

        Args:
            tenant_id: Tenant identifier (site id string).

        Returns:
            Number of users; 0 when tenant_id is not a site id.
        """
        site_id = site_id_from_tenant(tenant_id)
        if site_id is None:
            return 0

        stmt = (
            select(func.count())
            .select_from(UserModel)
            .where(UserModel.site_id == site_id)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def create(self, user: User) -> None:
        """Insert a new user.

        Args:
            user: User with site_id set.

        Raises:
            ValueError: If the user has no site.
        """
        if user.site_id is None:
            raise ValueError("User must belong to a site before it is created")

        self._session.add(
            UserModel(
                id=user.id,
                site_id=user.site_id,
                email=user.email,
                normalized_email=user.normalized_email,
                user_name=user.user_name,
                normalized_user_name=user.normalized_user_name,
                display_name=user.display_name,
                password_hash=user.password_hash,
                email_confirmed=user.email_confirmed,
                must_change_password=user.must_change_password,
                account_approved=user.account_approved,
                created_at=user.created_at,
            )
        )
        await self._session.flush()

    async def create_role(self, role: Role) -> None:
        """Insert a new role.

        Args:
            role: Role with site_id set.

        Raises:
            ValueError: If the role has no site.
        """
        if role.site_id is None:
            raise ValueError("Role must belong to a site before it is created")

        self._session.add(
            RoleModel(
                id=role.id,
                site_id=role.site_id,
                role_name=role.role_name,
                normalized_role_name=role.normalized_role_name,
            )
        )
        await self._session.flush()

    async def fetch_role(self, site_id: UUID, role_name: str) -> Role | None:
        """Find a site role by name (case-insensitive).

        Args:
            site_id: Owning site.
            role_name: Role name.

        Returns:
            Role if found, None otherwise.
        """
        stmt = select(RoleModel).where(
            RoleModel.site_id == site_id,
            RoleModel.normalized_role_name == role_name.upper(),
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_role(model)

    async def add_user_to_role(self, role_id: UUID, user_id: UUID) -> None:
        """Add a user to a role (no-op if already a member).

        Args:
            role_id: Role identifier.
            user_id: User identifier.
        """
        stmt = select(UserRoleModel.id).where(
            UserRoleModel.role_id == role_id,
            UserRoleModel.user_id == user_id,
        )
        result = await self._session.execute(stmt)
        if result.scalar_one_or_none() is not None:
            return

        self._session.add(UserRoleModel(role_id=role_id, user_id=user_id))
        await self._session.flush()

    async def list_roles_for_user(self, user_id: UUID) -> list[Role]:
        """List roles a user belongs to.

        Args:
            user_id: User identifier.

        Returns:
            Roles ordered by name.
        """
        stmt = (
            select(RoleModel)
            .join(UserRoleModel, UserRoleModel.role_id == RoleModel.id)
            .where(UserRoleModel.user_id == user_id)
            .order_by(RoleModel.role_name)
        )
        result = await self._session.execute(stmt)
        return [self._to_role(model) for model in result.scalars().all()]

    def _to_role(self, model: RoleModel) -> Role:
        """Map role model to domain entity.

        Args:
            model: Database model.

        Returns:
            Domain entity.
        """
        return Role(
            id=model.id,
            site_id=model.site_id,
            role_name=model.role_name,
            normalized_role_name=model.normalized_role_name,
        )
