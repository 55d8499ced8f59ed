"""
Participant resolution - pick the viewer's and the other side's listing for a conversation.
"""
from datetime import date, datetime
from typing import Any, Iterable, Mapping, Optional, Union

from ..models.conversation import ConversationParticipant, ViewerAndOtherListings
from ..models.listing import Listing


def _calendar_day(value: Optional[Union[date, datetime]]) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    return value


def _listing_for_game(
    participant: Optional[ConversationParticipant],
    team_id: Optional[int],
    game_date: Optional[Union[date, datetime]],
) -> Optional[Listing]:
    if participant is None:
        return None

    day = _calendar_day(game_date)
    for listing in participant.listings:
        if listing.team_id == team_id and _calendar_day(listing.game_date) == day:
            return listing
    return None


def get_viewer_and_other_listing(
    participants: Iterable[Union[ConversationParticipant, Mapping[str, Any]]],
    current_user_id: str,
    team_id: Optional[int] = None,
    game_date: Optional[Union[date, datetime]] = None,
) -> ViewerAndOtherListings:
    """
    Identify the viewer's and the other participant's listing for one game.

    Participants are matched by user id, never by position, and listings by
    team and calendar day. Either side is None when it cannot be found, and both
    are None without a game date.
    """
    if game_date is None:
        return ViewerAndOtherListings()

    resolved = [
        p if isinstance(p, ConversationParticipant) else ConversationParticipant.model_validate(p)
        for p in participants
    ]

    viewer = next((p for p in resolved if p.user_id == current_user_id), None)
    other = next((p for p in resolved if p.user_id != current_user_id), None)

    return ViewerAndOtherListings(
        viewer_listing=_listing_for_game(viewer, team_id, game_date),
        other_listing=_listing_for_game(other, team_id, game_date),
    )
