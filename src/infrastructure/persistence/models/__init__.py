"""Database models for persistence layer.

SQLAlchemy models mapping to database tables. These are infrastructure
concerns and are never imported by the domain layer.

Models Organization:
    - geo_country.py, geo_zone.py, language.py, currency.py: Reference data
    - site.py: Sites (tenant roots)
    - role.py: Site roles
    - user.py: Site users
    - user_role.py: User-to-role membership

Note:
    Domain entities (dataclasses) live in src/domain/entities/ and are mapped
    to these models by the repositories. Importing this package registers
    every table on BaseModel.metadata.
"""

from src.infrastructure.persistence.models.currency import Currency
from src.infrastructure.persistence.models.geo_country import GeoCountry
from src.infrastructure.persistence.models.geo_zone import GeoZone
from src.infrastructure.persistence.models.language import Language
from src.infrastructure.persistence.models.role import Role
from src.infrastructure.persistence.models.site import Site
from src.infrastructure.persistence.models.user import User
from src.infrastructure.persistence.models.user_role import UserRole

__all__ = [
    "Currency",
    "GeoCountry",
    "GeoZone",
    "Language",
    "Role",
    "Site",
    "User",
    "UserRole",
]
