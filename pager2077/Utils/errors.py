# errors.py
# Description: Error types for the pager client
#
"""
Pager Errors
------------

Typed exceptions raised by the collaborators of the navigation core:
- Validation failures for hex codes
- Clipboard read failures
- Friend service rejections

The navigation core never lets these escape an input event; they are turned
into display flags or logged.
"""

from enum import Enum
from typing import Optional

from loguru import logger


class PagerErrorType(Enum):
    """Types of pager errors."""
    VALIDATION_ERROR = "validation_error"
    CLIPBOARD_ERROR = "clipboard_error"
    FRIEND_SERVICE_ERROR = "friend_service_error"
    UNKNOWN_ERROR = "unknown_error"


class PagerError(Exception):
    """Base exception for pager operations."""

    error_type = PagerErrorType.UNKNOWN_ERROR
    display_message = "REQUEST FAILED"

    def __init__(self, message: str, original_exception: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.original_exception = original_exception

    def get_display_message(self) -> str:
        """Short upper-case text that fits on the pager display."""
        return self.display_message


class HexCodeValidationError(PagerError):
    """Text is not an 8-character hex code."""

    error_type = PagerErrorType.VALIDATION_ERROR
    display_message = "ERROR: INVALID HEX"


class ClipboardReadError(PagerError):
    """The clipboard could not be read."""

    error_type = PagerErrorType.CLIPBOARD_ERROR
    display_message = "ERROR: CLIPBOARD"


class FriendServiceError(PagerError):
    """A friend request operation was refused."""

    error_type = PagerErrorType.FRIEND_SERVICE_ERROR

    DISPLAY_MESSAGES = {
        "INVALID_HEX_CODE": "INVALID HEX CODE",
        "USER_NOT_FOUND": "FRIEND NOT FOUND",
        "CANNOT_ADD_SELF": "CANNOT ADD YOURSELF",
        "FRIENDSHIP_EXISTS": "ALREADY FRIENDS",
        "DUPLICATE_REQUEST": "REQUEST ALREADY SENT",
        "REQUEST_NOT_FOUND": "REQUEST NOT FOUND",
    }

    def __init__(self, code: str, message: str, original_exception: Optional[Exception] = None):
        super().__init__(message, original_exception)
        self.code = code

    def get_display_message(self) -> str:
        return self.DISPLAY_MESSAGES.get(self.code, PagerError.display_message)


def get_display_message(error: BaseException) -> str:
    """Map any exception to text for the pager display."""
    if isinstance(error, PagerError):
        return error.get_display_message()
    logger.debug(f"No display message for {type(error).__name__}: {error}")
    return PagerError.display_message
