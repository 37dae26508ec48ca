"""Relational repository implementations (adapters for hexagonal architecture).

Concrete SQLAlchemy implementations of repository protocols defined in the
domain layer. All repositories share the session they are constructed with.
"""

from src.infrastructure.persistence.repositories.geography_repository import (
    GeographyRepository,
)
from src.infrastructure.persistence.repositories.role_repository import RoleRepository
from src.infrastructure.persistence.repositories.site_repository import SiteRepository
from src.infrastructure.persistence.repositories.user_repository import UserRepository

__all__ = [
    "GeographyRepository",
    "RoleRepository",
    "SiteRepository",
    "UserRepository",
]
