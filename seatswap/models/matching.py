"""
Matching models - relationship classifications, match scores and card copy.
"""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from .listing import Listing


class InteractionIntent(str, Enum):
    """Viewer-relative intent between two listings."""
    SWAP = "swap"
    FOR_SALE = "forSale"
    LOOKING_FOR = "lookingFor"


class TransactionType(str, Enum):
    """Symmetric relationship between two listings, used to pick card layout."""
    SWAP = "SWAP"
    SELL = "SELL"
    BUY = "BUY"
    # No free-transfer signal exists on listings yet, so nothing resolves here.
    GIVEAWAY = "GIVEAWAY"
    GENERIC_ASYMMETRIC = "GENERIC_ASYMMETRIC"


class MatchScore(BaseModel):
    """A single eligible counterpart for a subject listing."""
    listing_id: Optional[str] = Field(description="Matched candidate's id")
    score: int = Field(description="Base 100 plus section/zone bonuses")
    reason: str = Field(description="Human-readable explanation")


class MatchResult(BaseModel):
    """A match resolved back to both listings, as returned to API callers."""
    my_listing: Listing
    matched_listing: Listing
    score: int
    reason: str


class MatchPresentation(BaseModel):
    """Everything a match card needs besides the listings themselves."""
    transaction_type: TransactionType
    header: str
    cta: str
    helper_text: str
    subtext: str
    score_label: Optional[str] = None
