"""Site database model.

Sites are the tenant roots; roles and users reference them by foreign key.
"""

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseModel


class Site(BaseModel):
    """Site row.

    Fields:
        id: UUID primary key (from BaseModel), also the tenant id
        created_at: Insert timestamp (from BaseModel)
        alias_id: Short alias (unique)
        site_name: Display name
        is_server_admin_site: Whether this site administers the server
        theme: Optional theme name
    """

    __tablename__ = "sites"

    alias_id: Mapped[str] = mapped_column(
        String(36),
        nullable=False,
        unique=True,
        comment="Short site alias (e.g., 's1')",
    )

    site_name: Mapped[str] = mapped_column(String(255), nullable=False)

    is_server_admin_site: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        index=True,
    )

    theme: Mapped[str | None] = mapped_column(String(100), nullable=True)

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Site(alias_id={self.alias_id!r}, site_name={self.site_name!r})>"
