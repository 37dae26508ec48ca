"""Domain entities.

Entities have identity and are plain dataclasses. They are mapped to and from
persistence models by the repository adapters.
"""

from src.domain.entities.currency import Currency
from src.domain.entities.geo_country import GeoCountry
from src.domain.entities.geo_zone import GeoZone
from src.domain.entities.language import Language
from src.domain.entities.role import Role
from src.domain.entities.site import Site
from src.domain.entities.user import User

__all__ = [
    "Currency",
    "GeoCountry",
    "GeoZone",
    "Language",
    "Role",
    "Site",
    "User",
]
