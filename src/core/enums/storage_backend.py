"""Persistence backend selection.

Seedbed can persist to one of two stores. The container reads
``settings.storage_backend`` and wires the matching repository adapters.

Backends:
- RELATIONAL: SQLAlchemy async ORM (PostgreSQL in production, SQLite locally)
- DOCUMENT: JSON documents held in Redis hashes
"""

from enum import Enum


class StorageBackend(str, Enum):
    """Supported persistence backends."""

    RELATIONAL = "relational"
    DOCUMENT = "document"
