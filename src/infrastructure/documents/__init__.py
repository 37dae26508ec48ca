"""Document store adapters (Redis).

Repository implementations that keep entities as JSON documents in Redis
hashes. They implement the same domain protocols as the relational
repositories and are selected with ``STORAGE_BACKEND=document``.
"""

from src.infrastructure.documents.document_keys import DocumentKeys
from src.infrastructure.documents.geography_repository import RedisGeographyRepository
from src.infrastructure.documents.role_repository import RedisRoleRepository
from src.infrastructure.documents.site_repository import RedisSiteRepository
from src.infrastructure.documents.user_repository import RedisUserRepository

__all__ = [
    "DocumentKeys",
    "RedisGeographyRepository",
    "RedisRoleRepository",
    "RedisSiteRepository",
    "RedisUserRepository",
]
