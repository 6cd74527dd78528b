"""
Navigation state management.

Both records are frozen: every input event produces a new NavigationState
rather than changing the old one.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from ..Constants import EMPTY_HEX_CODE, HEX_CODE_LENGTH, LAST_DIGIT_INDEX, METHOD_MANUAL, METHOD_PASTE
from ..Utils.hex_code import is_valid_hex_code


class Screen(Enum):
    """Every screen the pager can show."""
    MAIN = "main"
    MESSAGES = "messages"
    FRIENDS = "friends"
    ADD_FRIEND = "add_friend"
    FRIEND_REQUESTS = "friend_requests"
    MY_CODE = "my_code"
    SETTINGS = "settings"


class AddFriendMode(Enum):
    """Sub-modes of the add friend screen."""
    CHOOSING = "choosing"
    MANUAL = "manual"
    PASTE_RESULT = "paste_result"


@dataclass(frozen=True)
class AddFriendState:
    """Code entry state, only present while on the add friend screen."""

    mode: AddFriendMode = AddFriendMode.CHOOSING
    hex_digits: str = EMPTY_HEX_CODE
    digit_index: int = 0
    method_index: int = METHOD_PASTE
    paste_error: bool = False

    def __post_init__(self):
        if len(self.hex_digits) != HEX_CODE_LENGTH or not is_valid_hex_code(self.hex_digits):
            raise ValueError(f"hex_digits must be {HEX_CODE_LENGTH} upper-case hex characters: {self.hex_digits!r}")
        if not 0 <= self.digit_index <= LAST_DIGIT_INDEX:
            raise ValueError(f"digit_index out of range: {self.digit_index}")
        if self.method_index not in (METHOD_PASTE, METHOD_MANUAL):
            raise ValueError(f"method_index must be {METHOD_PASTE} or {METHOD_MANUAL}: {self.method_index}")

    @property
    def current_digit(self) -> str:
        return self.hex_digits[self.digit_index]

    @property
    def is_editing(self) -> bool:
        """True once a code is in the digit editor (typed or pasted)."""
        return self.mode in (AddFriendMode.MANUAL, AddFriendMode.PASTE_RESULT)


@dataclass(frozen=True)
class NavigationState:
    """The whole navigation session: screen, cursor and add friend sub-state."""

    screen: Screen = Screen.MAIN
    selected_index: int = 0
    add_friend: Optional[AddFriendState] = None

    def __post_init__(self):
        if self.selected_index < 0:
            raise ValueError(f"selected_index must be non-negative: {self.selected_index}")
        if (self.screen is Screen.ADD_FRIEND) != (self.add_friend is not None):
            raise ValueError("add_friend state must be present exactly when on the add friend screen")

    @classmethod
    def initial(cls) -> "NavigationState":
        """State at session start."""
        return cls()

    def go_to(self, screen: Screen) -> "NavigationState":
        """Enter a screen with the cursor on its first item."""
        add_friend = AddFriendState() if screen is Screen.ADD_FRIEND else None
        return NavigationState(screen=screen, selected_index=0, add_friend=add_friend)

    def with_index(self, index: int) -> "NavigationState":
        return replace(self, selected_index=index)

    def with_add_friend(self, add_friend: AddFriendState) -> "NavigationState":
        return replace(self, add_friend=add_friend)
