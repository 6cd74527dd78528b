"""
Hex code entry for the add friend screen.

Each function takes an AddFriendState and returns a new one.
"""

from dataclasses import replace

from loguru import logger

from ..Constants import EMPTY_HEX_CODE, LAST_DIGIT_INDEX, METHOD_MANUAL, METHOD_PASTE
from ..Utils.errors import HexCodeValidationError
from ..Utils.hex_code import clean_hex_code, cycle_hex_char, replace_char
from ..state.navigation_state import AddFriendMode, AddFriendState


# Method chooser

def toggle_method(state: AddFriendState) -> AddFriendState:
    """Switch between paste and manual entry, hiding any paste error."""
    method = METHOD_MANUAL if state.method_index == METHOD_PASTE else METHOD_PASTE
    return replace(state, method_index=method, paste_error=False)


def start_manual_entry(state: AddFriendState) -> AddFriendState:
    return replace(
        state,
        mode=AddFriendMode.MANUAL,
        hex_digits=EMPTY_HEX_CODE,
        digit_index=0,
        paste_error=False,
    )


def apply_pasted_text(state: AddFriendState, text: str) -> AddFriendState:
    """
    Load pasted text into the editor.

    A valid code lands in PASTE_RESULT with the cursor on the last digit so
    that select sends it straight away. Anything else sets paste_error and
    leaves the chooser as it was.
    """
    try:
        code = clean_hex_code(text)
    except HexCodeValidationError as e:
        logger.info(f"Rejected pasted hex code: {e}")
        return mark_paste_failed(state)

    return replace(
        state,
        mode=AddFriendMode.PASTE_RESULT,
        hex_digits=code,
        digit_index=LAST_DIGIT_INDEX,
        paste_error=False,
    )


def mark_paste_failed(state: AddFriendState) -> AddFriendState:
    return replace(state, mode=AddFriendMode.CHOOSING, paste_error=True)


# Digit editing

def cycle_digit(state: AddFriendState, step: int) -> AddFriendState:
    """Move the digit under the cursor through 0-F, wrapping around."""
    new_char = cycle_hex_char(state.current_digit, step)
    return replace(state, hex_digits=replace_char(state.hex_digits, state.digit_index, new_char))


def is_on_last_digit(state: AddFriendState) -> bool:
    return state.digit_index == LAST_DIGIT_INDEX


def next_digit(state: AddFriendState) -> AddFriendState:
    if is_on_last_digit(state):
        return state
    return replace(state, digit_index=state.digit_index + 1)


def previous_digit(state: AddFriendState) -> AddFriendState:
    if state.digit_index == 0:
        return state
    return replace(state, digit_index=state.digit_index - 1)
