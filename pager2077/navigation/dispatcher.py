"""
Input event dispatch.

Pure transition functions: each takes the current NavigationState and a
ListSnapshot and returns a Transition holding the next state plus at most one
collaborator action for the NavigationManager to carry out.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional, Union

from loguru import logger

from ..Constants import METHOD_PASTE, SETTINGS_ITEMS
from ..state.list_data import ListSnapshot
from ..state.navigation_state import AddFriendMode, NavigationState, Screen
from . import digit_editor
from .actions import AcceptFriendRequest, ReadClipboard, RejectFriendRequest, SendFriendRequest, ToggleSetting
from .ports import ClipboardResult
from .screen_registry import SCREEN_REGISTRY, FriendsEntry

Action = Union[ReadClipboard, SendFriendRequest, AcceptFriendRequest, RejectFriendRequest, ToggleSetting]


class InputEvent(Enum):
    """The pager's buttons. LEFT and RIGHT are reserved and change nothing."""
    UP = "up"
    DOWN = "down"
    SELECT = "select"
    BACK = "back"
    MENU = "menu"
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Transition:
    state: NavigationState
    action: Optional[Action] = None


Handler = Callable[[NavigationState, ListSnapshot], Transition]


def _require_every_screen(handlers: Dict[Screen, Handler], event: str) -> Dict[Screen, Handler]:
    missing = [screen.name for screen in Screen if screen not in handlers]
    if missing:
        raise RuntimeError(f"No {event} handler for: {', '.join(missing)}")
    return handlers


def _normalize(state: NavigationState, snapshot: ListSnapshot) -> NavigationState:
    # Lists can shrink between events, e.g. after a request is accepted
    index = SCREEN_REGISTRY.clamp(state.screen, state.selected_index, snapshot)
    if index != state.selected_index:
        logger.debug(f"Clamped selection on {state.screen.name} from {state.selected_index} to {index}")
        return state.with_index(index)
    return state


def _stay(state: NavigationState, snapshot: ListSnapshot) -> Transition:
    return Transition(state)


def _to_main(state: NavigationState, snapshot: ListSnapshot) -> Transition:
    return Transition(state.go_to(Screen.MAIN))


def _move_cursor(state: NavigationState, snapshot: ListSnapshot, step: int) -> Transition:
    max_index = SCREEN_REGISTRY.max_index(state.screen, snapshot)
    if max_index < 0:
        return Transition(state)
    return Transition(state.with_index(max(0, min(state.selected_index + step, max_index))))


def _vertical(state: NavigationState, snapshot: ListSnapshot, step: int) -> Transition:
    if state.screen is Screen.ADD_FRIEND:
        add_friend = state.add_friend
        if add_friend.mode is AddFriendMode.CHOOSING:
            return Transition(state.with_add_friend(digit_editor.toggle_method(add_friend)))
        # Up moves the digit forward through the alphabet
        return Transition(state.with_add_friend(digit_editor.cycle_digit(add_friend, -step)))
    return _move_cursor(state, snapshot, step)


# --- select ---

def _select_main(state: NavigationState, snapshot: ListSnapshot) -> Transition:
    target = SCREEN_REGISTRY.main_menu_target(state.selected_index)
    return Transition(state.go_to(target))


def _select_friends(state: NavigationState, snapshot: ListSnapshot) -> Transition:
    entry, friend = SCREEN_REGISTRY.friends_entry_at(state.selected_index, snapshot)
    if entry is FriendsEntry.ADD_FRIEND:
        return Transition(state.go_to(Screen.ADD_FRIEND))
    if entry is FriendsEntry.REQUESTS:
        return Transition(state.go_to(Screen.FRIEND_REQUESTS))
    logger.debug(f"Select on friend {friend.code} has no action")
    return Transition(state)


def _select_add_friend(state: NavigationState, snapshot: ListSnapshot) -> Transition:
    add_friend = state.add_friend
    if add_friend.mode is AddFriendMode.CHOOSING:
        if add_friend.method_index == METHOD_PASTE:
            return Transition(state, ReadClipboard())
        return Transition(state.with_add_friend(digit_editor.start_manual_entry(add_friend)))

    if digit_editor.is_on_last_digit(add_friend):
        logger.info(f"Submitting friend request for {add_friend.hex_digits}")
        return Transition(state.go_to(Screen.FRIENDS), SendFriendRequest(add_friend.hex_digits))
    return Transition(state.with_add_friend(digit_editor.next_digit(add_friend)))


def _select_friend_requests(state: NavigationState, snapshot: ListSnapshot) -> Transition:
    code = snapshot.request_code_at(state.selected_index)
    if code is None:
        return Transition(state)
    return Transition(state, AcceptFriendRequest(code))


def _select_settings(state: NavigationState, snapshot: ListSnapshot) -> Transition:
    _label, key = SETTINGS_ITEMS[state.selected_index]
    if key is None:
        return Transition(state)
    return Transition(state, ToggleSetting(key))


_SELECT_HANDLERS = _require_every_screen({
    Screen.MAIN: _select_main,
    Screen.MESSAGES: _stay,
    Screen.FRIENDS: _select_friends,
    Screen.ADD_FRIEND: _select_add_friend,
    Screen.FRIEND_REQUESTS: _select_friend_requests,
    Screen.MY_CODE: _stay,
    Screen.SETTINGS: _select_settings,
}, "select")


# --- back ---

def _back_add_friend(state: NavigationState, snapshot: ListSnapshot) -> Transition:
    add_friend = state.add_friend
    if add_friend.is_editing:
        return Transition(state.with_add_friend(digit_editor.previous_digit(add_friend)))
    return _to_main(state, snapshot)


def _back_friend_requests(state: NavigationState, snapshot: ListSnapshot) -> Transition:
    code = snapshot.request_code_at(state.selected_index)
    if code is None:
        return _to_main(state, snapshot)
    return Transition(state, RejectFriendRequest(code))


_BACK_HANDLERS = _require_every_screen({
    Screen.MAIN: _stay,
    Screen.MESSAGES: _to_main,
    Screen.FRIENDS: _to_main,
    Screen.ADD_FRIEND: _back_add_friend,
    Screen.FRIEND_REQUESTS: _back_friend_requests,
    Screen.MY_CODE: _to_main,
    Screen.SETTINGS: _to_main,
}, "back")


# --- menu ---

def _cancel_add_friend(state: NavigationState, snapshot: ListSnapshot) -> Transition:
    return Transition(state.go_to(Screen.FRIENDS))


_MENU_HANDLERS = _require_every_screen({
    Screen.MAIN: _stay,
    Screen.MESSAGES: _to_main,
    Screen.FRIENDS: _to_main,
    Screen.ADD_FRIEND: _cancel_add_friend,
    Screen.FRIEND_REQUESTS: _to_main,
    Screen.MY_CODE: _to_main,
    Screen.SETTINGS: _to_main,
}, "menu")


# --- public operations ---

def on_up(state: NavigationState, snapshot: ListSnapshot) -> Transition:
    return _vertical(_normalize(state, snapshot), snapshot, -1)


def on_down(state: NavigationState, snapshot: ListSnapshot) -> Transition:
    return _vertical(_normalize(state, snapshot), snapshot, 1)


def on_select(state: NavigationState, snapshot: ListSnapshot) -> Transition:
    state = _normalize(state, snapshot)
    return _SELECT_HANDLERS[state.screen](state, snapshot)


def on_back(state: NavigationState, snapshot: ListSnapshot) -> Transition:
    state = _normalize(state, snapshot)
    return _BACK_HANDLERS[state.screen](state, snapshot)


def on_menu(state: NavigationState, snapshot: ListSnapshot) -> Transition:
    state = _normalize(state, snapshot)
    return _MENU_HANDLERS[state.screen](state, snapshot)


def on_left(state: NavigationState, snapshot: ListSnapshot) -> Transition:
    return Transition(_normalize(state, snapshot))


def on_right(state: NavigationState, snapshot: ListSnapshot) -> Transition:
    return Transition(_normalize(state, snapshot))


_EVENT_HANDLERS: Dict[InputEvent, Handler] = {
    InputEvent.UP: on_up,
    InputEvent.DOWN: on_down,
    InputEvent.SELECT: on_select,
    InputEvent.BACK: on_back,
    InputEvent.MENU: on_menu,
    InputEvent.LEFT: on_left,
    InputEvent.RIGHT: on_right,
}


def dispatch(state: NavigationState, event: InputEvent, snapshot: ListSnapshot) -> Transition:
    """Run the handler for an input event."""
    return _EVENT_HANDLERS[event](state, snapshot)


def apply_clipboard_result(state: NavigationState, result: ClipboardResult) -> NavigationState:
    """
    Fold a finished clipboard read into the state that requested it.

    Only meaningful while the add friend chooser is showing; in any other
    state the result is stale and the state is returned unchanged.
    """
    if state.screen is not Screen.ADD_FRIEND or state.add_friend.mode is not AddFriendMode.CHOOSING:
        logger.warning(f"Ignoring clipboard result on {state.screen.name}")
        return state

    if not result.ok:
        logger.warning(f"Clipboard read failed: {result.error}")
        return state.with_add_friend(digit_editor.mark_paste_failed(state.add_friend))

    return state.with_add_friend(digit_editor.apply_pasted_text(state.add_friend, result.text))
