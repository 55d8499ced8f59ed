"""
Listing filters - narrow a listing collection by browse tab and seats needed.
"""
import logging
from enum import Enum
from typing import Literal, Sequence, TypeVar, Union

from ..models.badges import PrimaryBadge
from ..models.listing import to_listing
from .badges import get_listing_badges


logger = logging.getLogger(__name__)

T = TypeVar("T")
SeatsNeeded = Union[int, Literal["any"]]


class ListingTab(str, Enum):
    ALL = "all"
    FOR_SALE = "for-sale"
    LOOKING_FOR = "looking-for"
    SWAP = "swap"


TAB_BADGES = {
    ListingTab.FOR_SALE: PrimaryBadge.FOR_SALE,
    ListingTab.LOOKING_FOR: PrimaryBadge.LOOKING_FOR,
    ListingTab.SWAP: PrimaryBadge.SWAP,
}


def filter_listings_by_tab(listings: Sequence[T], tab: Union[ListingTab, str]) -> list[T]:
    """
    Keep listings whose primary badge matches the tab.

    Items are returned as given (mappings stay mappings), in input order.
    """
    tab = ListingTab(tab)
    if tab == ListingTab.ALL:
        return list(listings)

    target = TAB_BADGES[tab]
    return [
        listing for listing in listings
        if get_listing_badges(to_listing(listing)).primary == target
    ]


def filter_listings_by_seat_count(listings: Sequence[T], seats_needed: SeatsNeeded) -> list[T]:
    """
    Keep listings compatible with the number of seats needed.

    Looking For listings must request exactly that many seats; offers must
    have at least that many. Unknown seat counts always pass.
    """
    if seats_needed == "any":
        return list(listings)
    if isinstance(seats_needed, bool) or not isinstance(seats_needed, int) or seats_needed < 1:
        raise ValueError(f"seats_needed must be a positive integer or 'any', got {seats_needed!r}")

    filtered = []
    for item in listings:
        listing = to_listing(item)
        if listing.seat_count is None:
            filtered.append(item)
            continue

        if get_listing_badges(listing).primary == PrimaryBadge.LOOKING_FOR:
            if listing.seat_count == seats_needed:
                filtered.append(item)
        elif listing.seat_count >= seats_needed:
            filtered.append(item)

    return filtered


class ListingFilter:
    """Applies the browse tab and seat count filters in sequence."""

    def filter(
        self,
        listings: Sequence[T],
        tab: Union[ListingTab, str] = ListingTab.ALL,
        seats_needed: SeatsNeeded = "any",
    ) -> list[T]:
        """
        Filter listings for the browse page.

        Args:
            listings: Listings to filter
            tab: Active browse tab
            seats_needed: Seats the viewer needs, or "any"

        Returns:
            Listings passing both filters, in input order
        """
        logger.info(f"Filtering {len(listings)} listings (tab={ListingTab(tab).value}, seats={seats_needed})")

        filtered = filter_listings_by_tab(listings, tab)
        logger.info(f"After tab filter: {len(filtered)} listings")

        filtered = filter_listings_by_seat_count(filtered, seats_needed)
        logger.info(f"After seat count filter: {len(filtered)} listings")

        return filtered
