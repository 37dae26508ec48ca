"""Site user database model."""

from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, String, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseModel


class User(BaseModel):
    """User row, scoped to one site.

    Indexes:
        - uq_site_users_user_name: (site_id, normalized_user_name) UNIQUE
        - uq_site_users_email: (site_id, normalized_email) UNIQUE
    """

    __tablename__ = "site_users"

    site_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("sites.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    email: Mapped[str] = mapped_column(String(100), nullable=False)
    normalized_email: Mapped[str] = mapped_column(String(100), nullable=False)
    user_name: Mapped[str] = mapped_column(String(50), nullable=False)
    normalized_user_name: Mapped[str] = mapped_column(String(50), nullable=False)
    display_name: Mapped[str] = mapped_column(String(100), nullable=False)

    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Bcrypt hash",
    )

    email_confirmed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    must_change_password: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False
    )
    account_approved: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    __table_args__ = (
        UniqueConstraint(
            "site_id", "normalized_user_name", name="uq_site_users_user_name"
        ),
        UniqueConstraint("site_id", "normalized_email", name="uq_site_users_email"),
    )

    def __repr__(self) -> str:
        """String representation for debugging (no password hash)."""
        return f"<User(user_name={self.user_name!r}, site_id={self.site_id})>"
