"""Document store key construction.

Every key follows the pattern {prefix}:{collection} or
{prefix}:site:{site_id}:{collection} for tenant-owned collections. Keeping
construction in one place ensures all repositories agree on the layout.

Layout:
    {prefix}:geo:countries          hash  id -> country JSON
    {prefix}:geo:zones              hash  id -> zone JSON
    {prefix}:geo:languages          hash  id -> language JSON
    {prefix}:geo:currencies         hash  id -> currency JSON
    {prefix}:sites                  hash  id -> site JSON
    {prefix}:site:{site_id}:roles   hash  id -> role JSON
    {prefix}:site:{site_id}:users   hash  id -> user JSON
    {prefix}:role_sites             hash  role id -> owning site id
    {prefix}:user:{user_id}:roles   set   role ids

Usage:
    keys = DocumentKeys(prefix=settings.redis_key_prefix)
    await redis.hlen(keys.site_roles(tenant_id))
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class DocumentKeys:
    """Key builder for the Redis document store.

    Attributes:
        prefix: Key prefix (typically "seedbed").
    """

    prefix: str

    def countries(self) -> str:
        """Country collection key."""
        return f"{self.prefix}:geo:countries"

    def zones(self) -> str:
        """Zone collection key."""
        return f"{self.prefix}:geo:zones"

    def languages(self) -> str:
        """Language collection key."""
        return f"{self.prefix}:geo:languages"

    def currencies(self) -> str:
        """Currency collection key."""
        return f"{self.prefix}:geo:currencies"

    def sites(self) -> str:
        """Site collection key."""
        return f"{self.prefix}:sites"

    def site_roles(self, site_id: UUID | str) -> str:
        """Role collection of one site.

        Args:
            site_id: Site id or tenant id (same string form).

        Returns:
            Key string, e.g. "seedbed:site:0192...:roles".
        """
        return f"{self.prefix}:site:{site_id}:roles"

    def site_users(self, site_id: UUID | str) -> str:
        """User collection of one site.

        Args:
            site_id: Site id or tenant id (same string form).

        Returns:
            Key string, e.g. "seedbed:site:0192...:users".
        """
        return f"{self.prefix}:site:{site_id}:users"

    def role_sites(self) -> str:
        """Index of role id to owning site id."""
        return f"{self.prefix}:role_sites"

    def user_roles(self, user_id: UUID | str) -> str:
        """Role id set of one user.

        Args:
            user_id: User id.

        Returns:
            Key string, e.g. "seedbed:user:0192...:roles".
        """
        return f"{self.prefix}:user:{user_id}:roles"
