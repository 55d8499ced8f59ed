"""
Listing models - the listing record handed to the engine and its derived facts.
"""
import logging
from datetime import date, datetime, timedelta
from enum import Enum
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


logger = logging.getLogger(__name__)


class ListingType(str, Enum):
    """Explicit listing tag. Absent tags are inferred from populated fields."""
    HAVE = "HAVE"
    WANT = "WANT"


class ListingStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"


class RecordModel(BaseModel):
    """Base for records that arrive with camelCase keys from collaborators."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class OwnerProfile(RecordModel):
    first_name: Optional[str] = None
    last_initial: Optional[str] = None
    successful_swaps_count: int = 0


class ListingOwner(RecordModel):
    """Owner reference; used for self-match exclusion and display only."""
    id: Optional[str] = None
    profile: Optional[OwnerProfile] = None
    created_at: Optional[datetime] = None

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> Optional[str]:
        return None if v is None else str(v)

    @property
    def display_name(self) -> str:
        if not self.profile or not self.profile.first_name:
            return ""
        if self.profile.last_initial:
            return f"{self.profile.first_name} {self.profile.last_initial}."
        return self.profile.first_name

    def is_new_member(self, now: Optional[datetime] = None) -> bool:
        """Whether the owner joined within the last 30 days."""
        if self.created_at is None:
            return False
        return is_new_member(self.created_at, now)


NEW_MEMBER_WINDOW = timedelta(days=30)


def is_new_member(created_at: datetime, now: Optional[datetime] = None) -> bool:
    """Check if an account was created within the last 30 days."""
    if now is None:
        now = datetime.now(created_at.tzinfo)
    return created_at > now - NEW_MEMBER_WINDOW


class Listing(RecordModel):
    """
    A listing as fetched by the caller.

    Every field is optional so partial records still classify; blank or
    missing values are the "unknown" state, never an error.
    """
    id: Optional[str] = None
    listing_type: Optional[ListingType] = None

    # Seat the user currently holds
    have_section: str = ""
    have_row: str = ""
    have_seat: str = ""
    have_zone: str = ""

    # Wanted-in-exchange profile (empty = any)
    want_zones: list[str] = Field(default_factory=list)
    want_sections: list[str] = Field(default_factory=list)

    flexible: Optional[bool] = None
    seat_count: Optional[int] = None
    price_cents: Optional[int] = None
    game_date: Optional[Union[datetime, date]] = None
    status: ListingStatus = ListingStatus.ACTIVE
    team_id: Optional[int] = None

    user_id: Optional[str] = None
    user: Optional[ListingOwner] = None

    @field_validator("id", "user_id", mode="before")
    @classmethod
    def coerce_identifier(cls, v: Any) -> Optional[str]:
        return None if v is None else str(v)

    @field_validator("have_section", "have_row", "have_seat", "have_zone", mode="before")
    @classmethod
    def coerce_seat_field(cls, v: Any) -> str:
        """Treat null as blank and accept numeric section/row/seat values."""
        if v is None:
            return ""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("want_zones", "want_sections", mode="before")
    @classmethod
    def coerce_want_list(cls, v: Any) -> Any:
        if v is None:
            return []
        if isinstance(v, (list, tuple)):
            return [str(item) if isinstance(item, (int, float)) else item for item in v]
        return v

    @field_validator("listing_type", mode="before")
    @classmethod
    def parse_listing_type(cls, v: Any) -> Optional[ListingType]:
        """Unknown tags are dropped so the type gets inferred instead."""
        if v is None or isinstance(v, ListingType):
            return v
        if isinstance(v, str) and v.strip().upper() in ListingType.__members__:
            return ListingType(v.strip().upper())
        logger.debug(f"Ignoring unrecognised listing type: {v!r}")
        return None

    @field_validator("status", mode="before")
    @classmethod
    def parse_status(cls, v: Any) -> ListingStatus:
        if v is None:
            return ListingStatus.ACTIVE
        if isinstance(v, ListingStatus):
            return v
        if isinstance(v, str) and v.strip().upper() in ListingStatus.__members__:
            return ListingStatus(v.strip().upper())
        logger.debug(f"Treating unrecognised status {v!r} as inactive")
        return ListingStatus.INACTIVE

    @property
    def owner_id(self) -> Optional[str]:
        if self.user and self.user.id:
            return self.user.id
        return self.user_id

    @property
    def is_active(self) -> bool:
        return self.status == ListingStatus.ACTIVE


class ListingFacts(BaseModel):
    """Classifier output shared by every other component."""
    has_tickets: bool = False
    has_wants: bool = False


ListingLike = Union[Listing, Mapping[str, Any]]


def to_listing(record: ListingLike) -> Listing:
    """Validate a plain mapping into a Listing; Listings pass through."""
    if isinstance(record, Listing):
        return record
    return Listing.model_validate(record)
