"""Relational storage backend.

SQLAlchemy async engine and session handling (Database), the declarative
base for the seeding tables, and the repository adapters built on one
session per seeding run. Works against PostgreSQL (asyncpg) and SQLite
(aiosqlite).
"""

from src.infrastructure.persistence.base import BaseModel
from src.infrastructure.persistence.database import Database

__all__ = [
    "BaseModel",
    "Database",
]
