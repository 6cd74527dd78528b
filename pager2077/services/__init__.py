"""
Collaborators the navigation core runs against: clipboard, friend directory
and preference storage.
"""

from .clipboard import PyperclipClipboardReader
from .friend_directory import InMemoryFriendDirectory
from .settings_store import ConfigSettingsStore

__all__ = [
    'ConfigSettingsStore',
    'InMemoryFriendDirectory',
    'PyperclipClipboardReader',
]
