"""Data models for the lists the pager screens scroll through."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from ..Utils.hex_code import is_valid_hex_code


def normalize_code(value: str) -> str:
    code = str(value).strip().upper()
    if not is_valid_hex_code(code):
        raise ValueError(f"not an 8-character hex code: {value!r}")
    return code


class Friend(BaseModel):
    """A confirmed friend."""
    code: str
    online_status: Literal["online", "offline"] = "offline"
    display_name: Optional[str] = None

    @field_validator("code")
    @classmethod
    def check_code(cls, value: str) -> str:
        return normalize_code(value)


class PendingRequest(BaseModel):
    """An incoming friend request waiting for accept or reject."""
    code: str
    received_at: datetime = Field(default_factory=datetime.now)

    @field_validator("code")
    @classmethod
    def check_code(cls, value: str) -> str:
        return normalize_code(value)


class PagerMessage(BaseModel):
    """A received message."""
    sender_code: str
    text: str
    received_at: datetime = Field(default_factory=datetime.now)

    @field_validator("sender_code")
    @classmethod
    def check_sender_code(cls, value: str) -> str:
        return normalize_code(value)


@dataclass(frozen=True)
class ListSnapshot:
    """The lists as they were when an input event arrived."""

    friends: Tuple[Friend, ...] = field(default_factory=tuple)
    pending_requests: Tuple[PendingRequest, ...] = field(default_factory=tuple)
    messages: Tuple[PagerMessage, ...] = field(default_factory=tuple)

    @property
    def friend_count(self) -> int:
        return len(self.friends)

    @property
    def pending_count(self) -> int:
        return len(self.pending_requests)

    @property
    def message_count(self) -> int:
        return len(self.messages)

    def request_code_at(self, index: int) -> Optional[str]:
        """Code of the pending request at index, if there is one."""
        if 0 <= index < len(self.pending_requests):
            return self.pending_requests[index].code
        return None
