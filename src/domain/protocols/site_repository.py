"""Site repository protocol.

Defines the interface for site (tenant root) persistence.
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.site import Site


class SiteRepository(Protocol):
    """Protocol for site persistence operations.

    **Implementation Notes**:
    - ``create`` keeps the id already set on the entity
    - ``find_first`` orders by creation time, oldest first
    """

    async def count(self) -> int:
        """Count stored sites.

        Returns:
            Number of sites.
        """
        ...

    async def create(self, site: Site) -> None:
        """Insert a new site.

        Args:
            site: Site to insert. Its id is kept as the stored identifier.
        """
        ...

    async def find_by_id(self, site_id: UUID) -> Site | None:
        """Find site by ID.

        Args:
            site_id: Site identifier.

        Returns:
            Site if found, None otherwise.
        """
        ...

    async def find_server_admin_site(self) -> Site | None:
        """Find the site flagged as server admin site.

        Returns:
            The oldest server admin site, or None.
        """
        ...

    async def find_first(self) -> Site | None:
        """Find the oldest site.

        Returns:
            Oldest site, or None when the store has no sites.
        """
        ...
