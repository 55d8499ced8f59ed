"""
Interaction intent resolver - what a pairing means from the viewer's side.
"""
from ..models.listing import ListingLike
from ..models.matching import InteractionIntent
from .classifier import classify


def get_interaction_intent(viewer: ListingLike, other: ListingLike) -> InteractionIntent:
    """
    Resolve the viewer-relative intent between two listings.

    Rules are checked in order, first match wins:
    1. Both sides have tickets and wants -> swap
    2. Viewer only offers, other wants -> forSale
    3. Viewer only wants, other only offers -> lookingFor
    4. Fall back to the viewer's listing alone
    """
    mine = classify(viewer)
    theirs = classify(other)

    if mine.has_tickets and mine.has_wants and theirs.has_tickets and theirs.has_wants:
        return InteractionIntent.SWAP

    if mine.has_tickets and theirs.has_wants and not mine.has_wants:
        return InteractionIntent.FOR_SALE

    if (
        mine.has_wants
        and not mine.has_tickets
        and theirs.has_tickets
        and not theirs.has_wants
    ):
        return InteractionIntent.LOOKING_FOR

    if mine.has_tickets and mine.has_wants:
        return InteractionIntent.SWAP
    if mine.has_tickets:
        return InteractionIntent.FOR_SALE
    return InteractionIntent.LOOKING_FOR
