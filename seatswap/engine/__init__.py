"""Engine modules for listing classification and matching."""

from .classifier import classify, listing_kind
from .badges import get_listing_badges
from .intent import get_interaction_intent
from .transaction import (
    describe_match,
    get_cta_text,
    get_header_text,
    get_helper_text,
    get_match_transaction_type,
    get_score_label,
    get_subtext,
)
from .labels import format_request_label, format_seat_label, get_visible_wants_pills
from .matcher import CompatibilityMatcher, find_matches, find_matches_for_user
from .filters import (
    ListingFilter,
    ListingTab,
    filter_listings_by_seat_count,
    filter_listings_by_tab,
)
from .zones import has_known_zone, infer_zone_from_section
from .participants import get_viewer_and_other_listing

__all__ = [
    "classify",
    "listing_kind",
    "get_listing_badges",
    "get_interaction_intent",
    "describe_match",
    "get_cta_text",
    "get_header_text",
    "get_helper_text",
    "get_match_transaction_type",
    "get_score_label",
    "get_subtext",
    "format_request_label",
    "format_seat_label",
    "get_visible_wants_pills",
    "CompatibilityMatcher",
    "find_matches",
    "find_matches_for_user",
    "ListingFilter",
    "ListingTab",
    "filter_listings_by_seat_count",
    "filter_listings_by_tab",
    "has_known_zone",
    "infer_zone_from_section",
    "get_viewer_and_other_listing",
]
