"""
System clipboard access through pyperclip.
"""

import asyncio

import pyperclip
from loguru import logger

from ..Utils.errors import ClipboardReadError


class PyperclipClipboardReader:
    """ClipboardReader backed by pyperclip, run off the event loop."""

    async def read_text(self) -> str:
        try:
            text = await asyncio.to_thread(pyperclip.paste)
        except pyperclip.PyperclipException as e:
            logger.warning(f"Clipboard unavailable: {e}")
            raise ClipboardReadError("Clipboard unavailable", e) from e

        if text is None:
            raise ClipboardReadError("Clipboard is empty")
        logger.debug(f"Read {len(text)} characters from clipboard")
        return text
