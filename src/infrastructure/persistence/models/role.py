"""Site role database model."""

from uuid import UUID

from sqlalchemy import ForeignKey, String, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseModel


class Role(BaseModel):
    """Role row, scoped to one site.

    Indexes:
        - uq_site_roles_site_name: (site_id, normalized_role_name) UNIQUE
    """

    __tablename__ = "site_roles"

    site_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("sites.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    role_name: Mapped[str] = mapped_column(String(50), nullable=False)

    normalized_role_name: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        comment="Upper-cased role name for lookups",
    )

    __table_args__ = (
        UniqueConstraint(
            "site_id", "normalized_role_name", name="uq_site_roles_site_name"
        ),
    )
