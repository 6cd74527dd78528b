"""
Hex code utilities for friend identifiers.
"""
import re
import secrets

from ..Constants import HEX_ALPHABET, HEX_CODE_LENGTH
from .errors import HexCodeValidationError

_HEX_CODE_PATTERN = re.compile(r'[0-9A-F]{%d}' % HEX_CODE_LENGTH)
_WHITESPACE_PATTERN = re.compile(r'\s+')


def is_valid_hex_code(code: str) -> bool:
    """Check that a code is exactly 8 upper-case hex characters."""
    if not isinstance(code, str):
        return False
    return bool(_HEX_CODE_PATTERN.fullmatch(code))


def clean_hex_code(raw: str) -> str:
    """
    Normalize pasted text into a hex code.

    Whitespace anywhere in the text is dropped and letters are upper-cased.
    Anything else that is not a hex digit makes the text invalid.

    Raises:
        HexCodeValidationError: if the cleaned text is not exactly 8 hex characters
    """
    if raw is None:
        raise HexCodeValidationError("No text to read a hex code from")

    cleaned = _WHITESPACE_PATTERN.sub("", str(raw)).upper()
    if not is_valid_hex_code(cleaned):
        raise HexCodeValidationError(
            f"Expected {HEX_CODE_LENGTH} hex characters, got {len(cleaned)} characters"
        )
    return cleaned


def cycle_hex_char(char: str, step: int) -> str:
    """Move a hex character through the alphabet, wrapping at both ends."""
    index = HEX_ALPHABET.index(char.upper())
    return HEX_ALPHABET[(index + step) % len(HEX_ALPHABET)]


def replace_char(code: str, index: int, char: str) -> str:
    """Return a copy of code with position index replaced."""
    return code[:index] + char + code[index + 1:]


def generate_hex_code() -> str:
    """Generate a random hex code for a new identity."""
    return secrets.token_hex(HEX_CODE_LENGTH // 2).upper()
