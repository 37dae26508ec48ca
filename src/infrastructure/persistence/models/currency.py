"""Currency reference database model."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseModel


class Currency(BaseModel):
    """Currency reference row."""

    __tablename__ = "currencies"

    code: Mapped[str] = mapped_column(
        String(3),
        nullable=False,
        unique=True,
        comment="ISO 4217 code",
    )

    name: Mapped[str] = mapped_column(String(100), nullable=False)

    symbol: Mapped[str] = mapped_column(String(10), nullable=False, default="")

    culture_code: Mapped[str] = mapped_column(
        String(10),
        nullable=False,
        default="",
        comment="Formatting culture (e.g., 'en-US')",
    )
