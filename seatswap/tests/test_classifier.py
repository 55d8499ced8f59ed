"""
Tests for the listing classifier.
"""
import pytest

from seatswap.engine.classifier import classify, listing_kind
from seatswap.models.listing import Listing, ListingType


class TestClassify:
    """Tests for classify()."""

    def test_explicit_have_has_tickets(self):
        facts = classify(Listing(listing_type=ListingType.HAVE))

        assert facts.has_tickets is True
        assert facts.has_wants is False

    def test_explicit_want_has_wants(self):
        facts = classify(Listing(listing_type=ListingType.WANT))

        assert facts.has_tickets is False
        assert facts.has_wants is True

    def test_tickets_inferred_from_full_seat(self):
        """Test that section, row and seat together imply tickets."""
        facts = classify({"haveSection": "101", "haveRow": "A", "haveSeat": "7"})
        assert facts.has_tickets is True

    @pytest.mark.parametrize("missing", ["haveSection", "haveRow", "haveSeat"])
    def test_partial_seat_is_not_tickets(self, missing):
        """Test that any missing seat part prevents inference."""
        record = {"haveSection": "101", "haveRow": "A", "haveSeat": "7"}
        record[missing] = ""

        assert classify(record).has_tickets is False

    def test_whitespace_seat_is_not_tickets(self):
        facts = classify({"haveSection": "101", "haveRow": "  ", "haveSeat": "7"})
        assert facts.has_tickets is False

    def test_wants_inferred_from_zones(self):
        assert classify({"wantZones": ["Upper Bowl"]}).has_wants is True

    def test_wants_inferred_from_sections(self):
        assert classify({"wantSections": ["202"]}).has_wants is True

    def test_empty_listing_has_nothing(self):
        facts = classify({})

        assert facts.has_tickets is False
        assert facts.has_wants is False

    def test_have_with_wants_has_both(self):
        facts = classify({"listingType": "HAVE", "wantZones": ["Lower Bowl"]})

        assert facts.has_tickets is True
        assert facts.has_wants is True


class TestListingKind:
    """Tests for listing_kind()."""

    def test_explicit_type_wins(self):
        listing = {"listingType": "WANT", "haveSection": "1", "haveRow": "1", "haveSeat": "1"}
        assert listing_kind(listing) == ListingType.WANT

    def test_inferred_have(self):
        assert listing_kind({"haveSection": "1", "haveRow": "1", "haveSeat": "1"}) == ListingType.HAVE

    def test_inferred_want(self):
        assert listing_kind({"wantZones": ["Floor"]}) == ListingType.WANT

    def test_unclassifiable(self):
        assert listing_kind({"haveZone": "Floor"}) is None
