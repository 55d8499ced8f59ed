"""
Pydantic models for seatswap.
All data contracts are defined here for strict validation.
"""

from .listing import (
    Listing,
    ListingFacts,
    ListingOwner,
    ListingStatus,
    ListingType,
    OwnerProfile,
    is_new_member,
    to_listing,
)
from .badges import ListingBadges, PrimaryBadge, SecondaryBadge, VisibleWantsPills
from .conversation import ConversationParticipant, ViewerAndOtherListings
from .matching import (
    InteractionIntent,
    MatchPresentation,
    MatchResult,
    MatchScore,
    TransactionType,
)

__all__ = [
    # Listing
    "Listing",
    "ListingFacts",
    "ListingOwner",
    "ListingStatus",
    "ListingType",
    "OwnerProfile",
    "is_new_member",
    "to_listing",
    # Badges
    "ListingBadges",
    "PrimaryBadge",
    "SecondaryBadge",
    "VisibleWantsPills",
    # Conversation
    "ConversationParticipant",
    "ViewerAndOtherListings",
    # Matching
    "InteractionIntent",
    "MatchPresentation",
    "MatchResult",
    "MatchScore",
    "TransactionType",
]
