"""
Label formatter - seat and request strings that never render blank placeholders.
"""
from typing import Optional

from ..config import get_config
from ..models.badges import VisibleWantsPills
from ..models.listing import ListingLike, ListingType, to_listing


SECTION_NOT_SPECIFIED = "Section: Not specified"
FLEXIBLE_SEAT = "Flexible on exact seat"
NOT_REQUESTING = "Not requesting a swap"
FLEXIBLE_LOCATION = "Flexible on location"
REQUEST_SEPARATOR = " • "


def _clean(value: Optional[str]) -> str:
    return value.strip() if value else ""


def format_seat_label(listing: ListingLike) -> str:
    """
    Format seat information for display.

    WANT listings never show seat details. Otherwise only filled-in parts are
    rendered, so "Section , Row , Seat " cannot occur.
    """
    listing = to_listing(listing)

    if listing.listing_type == ListingType.WANT:
        return FLEXIBLE_SEAT

    section = _clean(listing.have_section)
    row = _clean(listing.have_row)
    seat = _clean(listing.have_seat)
    zone = _clean(listing.have_zone)

    parts = [f"Section {section}" if section else SECTION_NOT_SPECIFIED]
    if row:
        parts.append(f"Row {row}")
    if seat:
        parts.append(f"Seat {seat}")

    if parts == [SECTION_NOT_SPECIFIED] and zone:
        return f"{zone} (section not specified)"

    return ", ".join(parts)


def format_request_label(listing: ListingLike) -> str:
    """Format the wanted zones/sections of a listing for display."""
    listing = to_listing(listing)

    if (
        listing.listing_type == ListingType.HAVE
        and not listing.want_zones
        and not listing.want_sections
    ):
        return NOT_REQUESTING

    zones = [_clean(z) for z in listing.want_zones if _clean(z)]
    sections = [_clean(s) for s in listing.want_sections if _clean(s)]

    parts = []
    if zones:
        parts.append(", ".join(zones))
    if sections:
        parts.append(", ".join(f"Sec {s}" for s in sections))

    if not parts:
        return FLEXIBLE_LOCATION

    return REQUEST_SEPARATOR.join(parts)


def get_visible_wants_pills(
    wants: list[str],
    max_visible: Optional[int] = None,
) -> VisibleWantsPills:
    """Return the first few wants pills and how many more are hidden."""
    if max_visible is None:
        max_visible = get_config().display.max_visible_wants

    if len(wants) <= max_visible:
        return VisibleWantsPills(visible=list(wants), overflow_count=0)

    return VisibleWantsPills(
        visible=list(wants[:max_visible]),
        overflow_count=len(wants) - max_visible,
    )
