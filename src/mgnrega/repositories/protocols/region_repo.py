"""Region reference repository protocol."""

from typing import Protocol, Optional

from mgnrega.domain.models import Region


class RegionRepository(Protocol):
    """Read access to the region reference set."""

    def list_all(self) -> list[Region]:
        """List all regions, ordered by display name then key."""
        ...

    def find_by_key(self, region_key: str) -> Optional[Region]:
        """Retrieve a region by key."""
        ...

    def list_children(self, parent_region_key: str) -> list[Region]:
        """List regions whose parent is ``parent_region_key``, in list_all order."""
        ...

    def add(self, region: Region) -> Region:
        """Insert or replace a region (used when seeding reference data)."""
        ...

    def count(self) -> int:
        """Number of regions."""
        ...
