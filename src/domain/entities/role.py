"""Role domain entity.

Roles belong to a single site and are looked up by their human-readable name
("Administrators", "Authenticated Users", ...).
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass
class Role:
    """Site-scoped role.

    Attributes:
        id: Unique role identifier.
        site_id: Owning site. Assigned by the seeder before the role is created.
        role_name: Human-readable name used for lookup.
        normalized_role_name: Upper-cased name for case-insensitive matching.
    """

    id: UUID
    site_id: UUID | None
    role_name: str
    normalized_role_name: str = ""

    def __post_init__(self) -> None:
        """Validate name and derive the normalized name.

        Raises:
            ValueError: If role_name is empty or longer than 50 characters.
        """
        if not self.role_name:
            raise ValueError("Role name cannot be empty")

        if len(self.role_name) > 50:
            raise ValueError("Role name cannot exceed 50 characters")

        if not self.normalized_role_name:
            self.normalized_role_name = self.role_name.upper()

    def __str__(self) -> str:
        """Return string representation.

        Returns:
            str: Role name.
        """
        return self.role_name
