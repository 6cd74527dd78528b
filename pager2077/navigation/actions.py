"""
Collaborator actions requested by the dispatcher.

The dispatcher never calls a collaborator itself. It returns one of these
records next to the new state and the NavigationManager carries it out.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ReadClipboard:
    """Read the clipboard and fold the result back in with apply_clipboard_result."""


@dataclass(frozen=True)
class SendFriendRequest:
    code: str


@dataclass(frozen=True)
class AcceptFriendRequest:
    code: str


@dataclass(frozen=True)
class RejectFriendRequest:
    code: str


@dataclass(frozen=True)
class ToggleSetting:
    """Flip a boolean [pager] preference."""
    key: str
