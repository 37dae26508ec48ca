"""Declarative base for all database models.

Following hexagonal architecture:
- This is an infrastructure concern (database implementation detail)
- Domain entities do NOT inherit from this
- Repositories map domain entities to/from these models

Every model gets a UUID primary key and a created_at timestamp. Seeded
records are never updated by this service, so there is no updated_at mixin.

Note: SQLAlchemy's generic Uuid type keeps models portable between
PostgreSQL (native uuid) and SQLite (CHAR(32)).
"""

from datetime import datetime
from uuid import UUID as PythonUUID, uuid4

from sqlalchemy import DateTime, Uuid, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class BaseModel(DeclarativeBase):
    """Base class for all database models.

    Provides:
    - id: UUID primary key (generated when not supplied)
    - created_at: Timestamp when the row was inserted (UTC)

    Example:
        class SiteModel(BaseModel):
            __tablename__ = "sites"
            alias_id: Mapped[str]
            # Has: id, created_at
    """

    __abstract__ = True

    id: Mapped[PythonUUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid4,
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        """String representation for debugging.

        Returns:
            str: Class name and ID.
        """
        return f"<{self.__class__.__name__}(id={self.id})>"
