"""Zone (state/province) reference database model.

Zones reference their country by ISO code rather than by foreign key, so
the zone list can be loaded independently of country ids.
"""

from sqlalchemy import String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseModel


class GeoZone(BaseModel):
    """State or province reference row.

    Indexes:
        - uq_geo_zones_country_code: (country_code, code) UNIQUE
    """

    __tablename__ = "geo_zones"

    country_code: Mapped[str] = mapped_column(
        String(2),
        nullable=False,
        index=True,
        comment="ISO 3166-1 alpha-2 code of the owning country",
    )

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    code: Mapped[str] = mapped_column(
        String(10),
        nullable=False,
        comment="Postal abbreviation (e.g., 'ON')",
    )

    __table_args__ = (
        UniqueConstraint("country_code", "code", name="uq_geo_zones_country_code"),
    )
