"""Region reference data."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Region:
    """An administrative unit (district) and the region it belongs to."""

    region_key: str
    display_name: str
    parent_region_key: Optional[str] = None
