"""
Tests for tab and seat count filtering.
"""
import pytest

from seatswap.engine.filters import (
    ListingFilter,
    ListingTab,
    filter_listings_by_seat_count,
    filter_listings_by_tab,
)
from seatswap.models.listing import Listing


class TestListingFilters:
    """Tests for the browse page filters."""

    @pytest.fixture
    def sample_listings(self) -> list[Listing]:
        """Create one listing per badge plus seat count variants."""
        return [
            Listing(id="sale", listing_type="HAVE", seat_count=2),
            Listing(id="sale-unknown", listing_type="HAVE", seat_count=None),
            Listing(id="swap", listing_type="HAVE", want_zones=["Upper Bowl"], seat_count=4),
            Listing(id="looking-2", listing_type="WANT", seat_count=2),
            Listing(id="looking-4", listing_type="WANT", seat_count=4),
            Listing(id="looking-unknown", listing_type="WANT"),
        ]

    def ids(self, listings) -> list[str]:
        return [listing.id for listing in listings]

    def test_all_tab_passes_everything(self, sample_listings):
        assert filter_listings_by_tab(sample_listings, "all") == sample_listings

    def test_for_sale_tab(self, sample_listings):
        result = filter_listings_by_tab(sample_listings, "for-sale")
        assert self.ids(result) == ["sale", "sale-unknown"]

    def test_looking_for_tab(self, sample_listings):
        result = filter_listings_by_tab(sample_listings, ListingTab.LOOKING_FOR)
        assert self.ids(result) == ["looking-2", "looking-4", "looking-unknown"]

    def test_swap_tab(self, sample_listings):
        assert self.ids(filter_listings_by_tab(sample_listings, "swap")) == ["swap"]

    def test_unknown_tab_raises(self, sample_listings):
        with pytest.raises(ValueError):
            filter_listings_by_tab(sample_listings, "giveaway")

    def test_any_seat_count_passes_everything(self, sample_listings):
        assert filter_listings_by_seat_count(sample_listings, "any") == sample_listings

    def test_seat_count_two(self, sample_listings):
        """Test offers need enough seats and requests need an exact count."""
        result = filter_listings_by_seat_count(sample_listings, 2)
        assert self.ids(result) == ["sale", "sale-unknown", "swap", "looking-2", "looking-unknown"]

    def test_seat_count_four(self, sample_listings):
        result = filter_listings_by_seat_count(sample_listings, 4)
        assert self.ids(result) == ["sale-unknown", "swap", "looking-4", "looking-unknown"]

    @pytest.mark.parametrize("seats", [0, -1, "2", True])
    def test_invalid_seat_count_raises(self, sample_listings, seats):
        with pytest.raises(ValueError):
            filter_listings_by_seat_count(sample_listings, seats)

    def test_raw_records_are_returned_unchanged(self):
        records = [
            {"id": "a", "listingType": "HAVE", "seatCount": 1},
            {"id": "b", "listingType": "HAVE", "seatCount": 3},
        ]
        result = filter_listings_by_seat_count(records, 2)
        assert result == [records[1]]

    def test_empty_listings_returns_empty(self):
        assert filter_listings_by_tab([], "swap") == []
        assert filter_listings_by_seat_count([], 2) == []

    def test_combined_filter(self, sample_listings):
        result = ListingFilter().filter(sample_listings, tab="looking-for", seats_needed=4)
        assert self.ids(result) == ["looking-4", "looking-unknown"]

    def test_combined_filter_defaults(self, sample_listings):
        assert ListingFilter().filter(sample_listings) == sample_listings
