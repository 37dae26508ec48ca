"""Language reference database model."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseModel


class Language(BaseModel):
    """Language reference row."""

    __tablename__ = "languages"

    name: Mapped[str] = mapped_column(String(100), nullable=False)

    code: Mapped[str] = mapped_column(
        String(2),
        nullable=False,
        unique=True,
        comment="ISO 639-1 code",
    )

    sort_rank: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=1,
    )
