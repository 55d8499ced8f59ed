"""
Badge deriver - primary (Swap / For Sale / Looking For) and secondary (Flexible) labels.
"""
from ..models.badges import ListingBadges, PrimaryBadge, SecondaryBadge
from ..models.listing import Listing, ListingLike, to_listing
from .classifier import classify


def is_flexible(listing: Listing) -> bool:
    """Explicit flag, or any wanted zone reading like "Any ..."."""
    if listing.flexible is True:
        return True
    return any("any" in zone.lower() for zone in listing.want_zones)


def get_listing_badges(listing: ListingLike) -> ListingBadges:
    """
    Derive badge labels from listing data.

    Mapping:
    - tickets and wants => Swap
    - tickets only => For Sale
    - anything else => Looking For
    """
    listing = to_listing(listing)
    facts = classify(listing)

    if facts.has_tickets and facts.has_wants:
        primary = PrimaryBadge.SWAP
    elif facts.has_tickets:
        primary = PrimaryBadge.FOR_SALE
    else:
        primary = PrimaryBadge.LOOKING_FOR

    secondary = SecondaryBadge.FLEXIBLE if is_flexible(listing) else None

    return ListingBadges(primary=primary, secondary=secondary)
