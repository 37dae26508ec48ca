"""User-to-role membership database model."""

from uuid import UUID

from sqlalchemy import ForeignKey, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseModel


class UserRole(BaseModel):
    """Membership row linking a user to a role."""

    __tablename__ = "site_user_roles"

    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("site_users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    role_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("site_roles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    __table_args__ = (
        UniqueConstraint("user_id", "role_id", name="uq_site_user_roles_user_role"),
    )
