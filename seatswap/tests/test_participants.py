"""
Tests for resolving the viewer's and the other participant's listing.
"""
from datetime import date, datetime

import pytest

from seatswap.engine.participants import get_viewer_and_other_listing
from seatswap.models.conversation import ConversationParticipant
from seatswap.models.listing import Listing


GAME_DAY = datetime(2025, 3, 1, 19, 30)


class TestViewerAndOtherListing:
    """Tests for get_viewer_and_other_listing()."""

    @pytest.fixture
    def participants(self) -> list[ConversationParticipant]:
        return [
            ConversationParticipant(
                user_id="other",
                listings=[
                    Listing(id="other-old", team_id=1, game_date=datetime(2025, 2, 1, 19, 30)),
                    Listing(id="other-game", team_id=1, game_date=datetime(2025, 3, 1, 12, 0)),
                ],
            ),
            ConversationParticipant(
                user_id="me",
                listings=[
                    Listing(id="me-wrong-team", team_id=2, game_date=GAME_DAY),
                    Listing(id="me-game", team_id=1, game_date=GAME_DAY),
                ],
            ),
        ]

    def test_resolves_by_user_id_not_position(self, participants):
        result = get_viewer_and_other_listing(participants, "me", team_id=1, game_date=GAME_DAY)

        assert result.viewer_listing.id == "me-game"
        assert result.other_listing.id == "other-game"

    def test_matches_on_calendar_day(self, participants):
        result = get_viewer_and_other_listing(participants, "other", team_id=1, game_date=date(2025, 3, 1))

        assert result.viewer_listing.id == "other-game"
        assert result.other_listing.id == "me-game"

    def test_missing_listing_is_none(self, participants):
        result = get_viewer_and_other_listing(participants, "me", team_id=3, game_date=GAME_DAY)

        assert result.viewer_listing is None
        assert result.other_listing is None

    def test_missing_participant_is_none(self):
        solo = [{"userId": "me", "listings": [{"id": "l1", "teamId": 1, "gameDate": GAME_DAY}]}]

        result = get_viewer_and_other_listing(solo, "me", team_id=1, game_date=GAME_DAY)

        assert result.viewer_listing.id == "l1"
        assert result.other_listing is None

    def test_nested_user_shape(self):
        """Test participants fetched with their user and its listings."""
        participants = [
            {
                "userId": "other",
                "user": {
                    "id": "other",
                    "profile": {"firstName": "Jo", "lastInitial": None},
                    "listings": [{"id": "theirs", "teamId": 1, "gameDate": GAME_DAY}],
                },
            },
            {
                "userId": "me",
                "user": {
                    "id": "me",
                    "profile": None,
                    "listings": [{"id": "mine", "teamId": 1, "gameDate": GAME_DAY}],
                },
            },
        ]

        result = get_viewer_and_other_listing(participants, "me", team_id=1, game_date=GAME_DAY)

        assert result.viewer_listing.id == "mine"
        assert result.other_listing.id == "theirs"

    def test_nested_user_id_identifies_participant(self):
        participant = ConversationParticipant.model_validate({"user": {"id": 7, "listings": []}})

        assert participant.user_id == "7"
        assert participant.listings == []

    def test_missing_game_date_resolves_nothing(self):
        """Test that undated listings are not matched without a game date."""
        participants = [
            ConversationParticipant(user_id="me", listings=[Listing(id="undated", team_id=1)]),
            ConversationParticipant(user_id="other", listings=[Listing(id="other-undated", team_id=1)]),
        ]

        result = get_viewer_and_other_listing(participants, "me", team_id=1, game_date=None)

        assert result.viewer_listing is None
        assert result.other_listing is None
