"""Domain protocols (ports) package.

Protocol definitions the domain and application layers depend on.
Infrastructure adapters implement these protocols without inheritance.

Usage:
    from src.domain.protocols import GeographyRepository, TenantResolver
"""

# Service protocols
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
from src.domain.protocols.tenant_resolver_protocol import TenantResolver

# Repository protocols
from src.domain.protocols.geography_repository import GeographyRepository
from src.domain.protocols.role_repository import RoleRepository
from src.domain.protocols.site_repository import SiteRepository
from src.domain.protocols.user_repository import UserRepository

__all__ = [
    # Service protocols
    "LoggerProtocol",
    "PasswordHashingProtocol",
    "TenantResolver",
    # Repository protocols
    "GeographyRepository",
    "RoleRepository",
    "SiteRepository",
    "UserRepository",
]
