"""Country reference database model."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseModel


class GeoCountry(BaseModel):
    """Country reference row.

    Fields:
        id: UUID primary key (from BaseModel)
        created_at: Insert timestamp (from BaseModel)
        name: English short name
        iso_code2: ISO 3166-1 alpha-2 code (unique)
        iso_code3: ISO 3166-1 alpha-3 code (unique)
    """

    __tablename__ = "geo_countries"

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="English short name (e.g., 'Canada')",
    )

    iso_code2: Mapped[str] = mapped_column(
        String(2),
        nullable=False,
        unique=True,
        index=True,
        comment="ISO 3166-1 alpha-2 code",
    )

    iso_code3: Mapped[str] = mapped_column(
        String(3),
        nullable=False,
        unique=True,
        comment="ISO 3166-1 alpha-3 code",
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<GeoCountry(iso_code2={self.iso_code2!r}, name={self.name!r})>"
