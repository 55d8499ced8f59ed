"""
Badge models - primary and secondary listing labels.
"""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class PrimaryBadge(str, Enum):
    SWAP = "Swap"
    FOR_SALE = "For Sale"
    LOOKING_FOR = "Looking For"


class SecondaryBadge(str, Enum):
    FLEXIBLE = "Flexible"


class ListingBadges(BaseModel):
    """Badge pair rendered on a listing card."""
    primary: PrimaryBadge
    secondary: Optional[SecondaryBadge] = None


class VisibleWantsPills(BaseModel):
    """Wants pills truncated for a card, plus how many were hidden."""
    visible: list[str] = Field(default_factory=list)
    overflow_count: int = 0
