"""
Conversation models - participants and the listings they bring to a chat.
"""
from typing import Any, Mapping, Optional

from pydantic import Field, model_validator

from .listing import Listing, OwnerProfile, RecordModel


class ConversationParticipant(RecordModel):
    """
    A chat participant with the listings they currently own.

    Accepts the flat shape ({userId, listings}) as well as the nested one
    callers fetch with the participant's user ({userId, user: {id, profile,
    listings}}). When nested, the user's id identifies the participant.
    """
    user_id: str
    profile: Optional[OwnerProfile] = None
    listings: list[Listing] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def lift_nested_user(cls, data: Any) -> Any:
        if not isinstance(data, Mapping) or not isinstance(data.get("user"), Mapping):
            return data

        user = data["user"]
        lifted = {k: v for k, v in data.items() if k not in ("user", "userId", "user_id")}
        user_id = user.get("id")
        if user_id is None:
            user_id = data.get("userId", data.get("user_id"))
        lifted["userId"] = None if user_id is None else str(user_id)

        if "profile" not in lifted and user.get("profile") is not None:
            lifted["profile"] = user["profile"]
        if "listings" not in lifted:
            lifted["listings"] = user.get("listings") or []
        return lifted


class ViewerAndOtherListings(RecordModel):
    viewer_listing: Optional[Listing] = None
    other_listing: Optional[Listing] = None
