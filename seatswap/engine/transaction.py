"""
Transaction type resolver - symmetric classification of a listing pair plus card copy.

The header/CTA/helper strings are a contract with the UI layer; keep them verbatim.
"""
from typing import Optional

from ..models.listing import Listing, ListingLike, to_listing
from ..models.matching import MatchPresentation, TransactionType
from .classifier import classify
from .labels import format_request_label


HEADER_TEXT = {
    TransactionType.SWAP: "Swap match",
    TransactionType.SELL: "Someone wants your seat",
    TransactionType.BUY: "You requested their seat",
    TransactionType.GIVEAWAY: "Giveaway match",
    TransactionType.GENERIC_ASYMMETRIC: "Potential match",
}

CTA_TEXT = {
    TransactionType.SWAP: "Start swap chat",
    TransactionType.SELL: "Offer your seat",
    TransactionType.BUY: "Message seller",
    TransactionType.GIVEAWAY: "Message giver",
    TransactionType.GENERIC_ASYMMETRIC: "Start conversation",
}

HELPER_TEXT = {
    TransactionType.SWAP: (
        "Use messages to confirm seats, game, and transfer details before exchanging."
    ),
    TransactionType.SELL: (
        "You're not swapping seats. You're responding to a fan who's looking for one. "
        "Use messages to confirm details, pricing, and transfer."
    ),
    TransactionType.BUY: (
        "This is a request. Use messages to confirm details, pricing, and transfer."
    ),
    TransactionType.GIVEAWAY: "Confirm transfer method and timing in chat.",
    TransactionType.GENERIC_ASYMMETRIC: (
        "Review both listings carefully and use messages to discuss the details "
        "of this potential match."
    ),
}

STRONG_MATCH_SCORE = 100
GOOD_MATCH_SCORE = 50


def get_match_transaction_type(viewer: ListingLike, other: ListingLike) -> TransactionType:
    """
    Determine the transaction type between the viewer's and the other listing.

    GIVEAWAY is never returned: listings carry no free-transfer signal yet.
    """
    mine = classify(viewer)
    theirs = classify(other)

    if mine.has_tickets and mine.has_wants and theirs.has_tickets and theirs.has_wants:
        return TransactionType.SWAP

    if mine.has_tickets and theirs.has_wants and not mine.has_wants:
        return TransactionType.SELL

    if mine.has_wants and theirs.has_tickets and not theirs.has_wants:
        return TransactionType.BUY

    return TransactionType.GENERIC_ASYMMETRIC


def get_header_text(transaction_type: TransactionType) -> str:
    return HEADER_TEXT[TransactionType(transaction_type)]


def get_cta_text(transaction_type: TransactionType) -> str:
    return CTA_TEXT[TransactionType(transaction_type)]


def get_helper_text(transaction_type: TransactionType) -> str:
    """Text for the "What this means" section of a match card."""
    return HELPER_TEXT[TransactionType(transaction_type)]


def _offered(listing: Listing) -> str:
    return listing.have_zone.strip() or listing.have_section.strip() or "tickets"


def get_subtext(
    transaction_type: TransactionType,
    viewer: ListingLike,
    other: ListingLike,
) -> str:
    """One-line summary of what each side offers or wants."""
    viewer = to_listing(viewer)
    other = to_listing(other)
    transaction_type = TransactionType(transaction_type)

    if transaction_type == TransactionType.SWAP:
        viewer_wants = format_request_label(viewer).lower()
        other_wants = format_request_label(other).lower()
        return f"You want {viewer_wants} and they want {other_wants}"
    if transaction_type == TransactionType.SELL:
        they_want = format_request_label(other).lower()
        return f"They're looking for {they_want}. You're offering {_offered(viewer)}."
    if transaction_type == TransactionType.BUY:
        you_want = format_request_label(viewer).lower()
        return f"You're looking for {you_want}. They're offering {_offered(other)}."
    if transaction_type == TransactionType.GIVEAWAY:
        return "This seat may be offered for free. Confirm details in chat."
    return "Compare the offer and request, then message to confirm details."


def get_score_label(score: int) -> str:
    """Map a match score to a friendly label."""
    if score >= STRONG_MATCH_SCORE:
        return "Strong match"
    if score >= GOOD_MATCH_SCORE:
        return "Good match"
    return "Low match"


def describe_match(
    viewer: ListingLike,
    other: ListingLike,
    score: Optional[int] = None,
) -> MatchPresentation:
    """Build all card copy for a viewer/other pairing."""
    viewer = to_listing(viewer)
    other = to_listing(other)
    transaction_type = get_match_transaction_type(viewer, other)

    return MatchPresentation(
        transaction_type=transaction_type,
        header=get_header_text(transaction_type),
        cta=get_cta_text(transaction_type),
        helper_text=get_helper_text(transaction_type),
        subtext=get_subtext(transaction_type, viewer, other),
        score_label=get_score_label(score) if score is not None else None,
    )
