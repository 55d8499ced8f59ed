"""
Listing classifier - the single source of "has tickets" / "has wants" facts.

Every other engine module calls classify() instead of re-deriving these.
"""
from typing import Optional

from ..models.listing import ListingFacts, ListingLike, ListingType, to_listing


def _present(value: Optional[str]) -> bool:
    return bool(value and value.strip())


def classify(listing: ListingLike) -> ListingFacts:
    """
    Derive ticket/want facts from a listing.

    An explicit listing_type wins for its own fact. Without it, a listing has
    tickets only when section, row and seat are all filled in, and has wants
    when either want list is non-empty.
    """
    listing = to_listing(listing)

    has_tickets = listing.listing_type == ListingType.HAVE or (
        _present(listing.have_section)
        and _present(listing.have_row)
        and _present(listing.have_seat)
    )
    has_wants = (
        listing.listing_type == ListingType.WANT
        or len(listing.want_zones) > 0
        or len(listing.want_sections) > 0
    )

    return ListingFacts(has_tickets=has_tickets, has_wants=has_wants)


def listing_kind(listing: ListingLike) -> Optional[ListingType]:
    """Effective HAVE/WANT type, or None when the listing has neither."""
    listing = to_listing(listing)
    if listing.listing_type is not None:
        return listing.listing_type

    facts = classify(listing)
    if facts.has_tickets:
        return ListingType.HAVE
    if facts.has_wants:
        return ListingType.WANT
    return None
