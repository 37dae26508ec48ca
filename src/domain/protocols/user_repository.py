"""User repository protocol.

Defines the interface for site users, their roles, and role membership.
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.role import Role
from src.domain.entities.user import User


class UserRepository(Protocol):
    """Protocol for user, role and membership persistence.

    **Design Principles**:
    - Users and roles are always scoped to one site
    - Membership is a (role_id, user_id) pair kept by the store
    - Adding an existing membership again is a no-op
    """

    async def count_by_tenant(self, tenant_id: str) -> int:
        """Count users belonging to a tenant.

        Args:
            tenant_id: Tenant identifier (string form of the site id).

        Returns:
            Number of users for the tenant. Unknown tenants count as 0.
        """
        ...

    async def create(self, user: User) -> None:
        """Insert a new user.

        Args:
            user: User with ``site_id`` set.

        Raises:
            ValueError: If the user has no site.
        """
        ...

    async def create_role(self, role: Role) -> None:
        """Insert a new role.

        Args:
            role: Role with ``site_id`` set.

        Raises:
            ValueError: If the role has no site.
        """
        ...

    async def fetch_role(self, site_id: UUID, role_name: str) -> Role | None:
        """Find a role of a site by name.

        Matching is case-insensitive (uses the normalized role name).

        Args:
            site_id: Owning site.
            role_name: Role name (e.g., "Administrators").

        Returns:
            Role if found, None otherwise.
        """
        ...

    async def add_user_to_role(self, role_id: UUID, user_id: UUID) -> None:
        """Add a user to a role.

        Args:
            role_id: Role identifier.
            user_id: User identifier.
        """
        ...

    async def list_roles_for_user(self, user_id: UUID) -> list[Role]:
        """List the roles a user belongs to.

        Args:
            user_id: User identifier.

        Returns:
            Roles ordered by name.
        """
        ...
