"""
Registry of all pager screens and the size of their selectable lists.
"""

from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple

from loguru import logger

from ..Constants import MAIN_MENU_ITEMS, SETTINGS_ITEMS
from ..state.list_data import Friend, ListSnapshot
from ..state.navigation_state import Screen

ItemCounter = Callable[[ListSnapshot], int]


class FriendsEntry(Enum):
    """Kinds of rows on the friends screen."""
    ADD_FRIEND = "add_friend"
    REQUESTS = "requests"
    FRIEND = "friend"


def _friends_item_count(snapshot: ListSnapshot) -> int:
    # ADD FRIEND row, REQUESTS row when anything is pending, then one row per friend
    return 1 + (1 if snapshot.pending_count > 0 else 0) + snapshot.friend_count


class ScreenRegistry:
    """Central registry for every screen and how many items it can select."""

    def __init__(self):
        self._counters: Dict[Screen, ItemCounter] = {}
        self._load_screens()

    def _load_screens(self) -> None:
        """Register the item counter of each screen."""
        self._counters = {
            Screen.MAIN: lambda snapshot: len(MAIN_MENU_ITEMS),
            Screen.MESSAGES: lambda snapshot: snapshot.message_count,
            Screen.FRIENDS: _friends_item_count,
            # The code editor has its own cursor; the list cursor stays at 0
            Screen.ADD_FRIEND: lambda snapshot: 1,
            Screen.FRIEND_REQUESTS: lambda snapshot: snapshot.pending_count,
            Screen.MY_CODE: lambda snapshot: 1,
            Screen.SETTINGS: lambda snapshot: len(SETTINGS_ITEMS),
        }

        missing = [screen.name for screen in Screen if screen not in self._counters]
        if missing:
            raise RuntimeError(f"Screens without an item counter: {', '.join(missing)}")

        logger.debug(f"Registered {len(self._counters)} screens")

    def item_count(self, screen: Screen, snapshot: ListSnapshot) -> int:
        """Number of selectable items on a screen."""
        return self._counters[screen](snapshot)

    def max_index(self, screen: Screen, snapshot: ListSnapshot) -> int:
        """
        Highest valid selection index for a screen.

        Returns -1 when the screen's list is empty.
        """
        return self.item_count(screen, snapshot) - 1

    def clamp(self, screen: Screen, index: int, snapshot: ListSnapshot) -> int:
        """Pull an index back into range; empty lists pin the cursor at 0."""
        return max(0, min(index, self.max_index(screen, snapshot)))

    def main_menu_target(self, index: int) -> Screen:
        """Screen opened by the main menu item at index."""
        _label, target = MAIN_MENU_ITEMS[index]
        return Screen(target)

    def friends_entries(self, snapshot: ListSnapshot) -> List[Tuple[FriendsEntry, Optional[Friend]]]:
        """Rows of the friends screen in display order."""
        entries: List[Tuple[FriendsEntry, Optional[Friend]]] = [(FriendsEntry.ADD_FRIEND, None)]
        if snapshot.pending_count > 0:
            entries.append((FriendsEntry.REQUESTS, None))
        entries.extend((FriendsEntry.FRIEND, friend) for friend in snapshot.friends)
        return entries

    def friends_entry_at(self, index: int, snapshot: ListSnapshot) -> Tuple[FriendsEntry, Optional[Friend]]:
        """Row of the friends screen at index."""
        return self.friends_entries(snapshot)[index]

    def list_screens(self) -> List[Screen]:
        """List all registered screens."""
        return list(self._counters)


SCREEN_REGISTRY = ScreenRegistry()
