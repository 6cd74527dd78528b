"""
LCD rendering for the pager.

render_lines() turns the navigation state into the text rows of the display;
PagerDisplay is the Textual widget that shows them.
"""

from typing import Callable, Dict, List, Optional

from textual.widgets import Static

from ..Constants import ADD_FRIEND_LABEL, ADD_FRIEND_METHODS, APP_TITLE, MAIN_MENU_ITEMS, REQUESTS_LABEL, SETTINGS_ITEMS
from ..navigation.ports import SettingsStore
from ..navigation.screen_registry import SCREEN_REGISTRY, FriendsEntry
from ..state.list_data import ListSnapshot
from ..state.navigation_state import NavigationState, Screen

DIVIDER = "─────────────"


def _row(text: str, selected: bool) -> str:
    return f"{'>' if selected else ' '} {text}"


class _Context:
    def __init__(self, state: NavigationState, snapshot: ListSnapshot, own_code: str,
                 settings: Optional[SettingsStore]):
        self.state = state
        self.snapshot = snapshot
        self.own_code = own_code
        self.settings = settings

    def is_selected(self, index: int) -> bool:
        return index == self.state.selected_index


def _render_main(ctx: _Context) -> List[str]:
    return [APP_TITLE, ""] + [_row(label, ctx.is_selected(i)) for i, (label, _target) in enumerate(MAIN_MENU_ITEMS)]


def _render_messages(ctx: _Context) -> List[str]:
    lines = ["MESSAGES", ""]
    if not ctx.snapshot.messages:
        return lines + ["NO MESSAGES"]
    for i, message in enumerate(ctx.snapshot.messages):
        lines.append(_row(message.sender_code, ctx.is_selected(i)))
    selected = ctx.snapshot.messages[ctx.state.selected_index] if ctx.state.selected_index < ctx.snapshot.message_count else None
    if selected is not None:
        lines += ["", selected.text, selected.received_at.strftime("%H:%M")]
    return lines


def _render_friends(ctx: _Context) -> List[str]:
    lines = ["FRIENDS", ""]
    for i, (entry, friend) in enumerate(SCREEN_REGISTRY.friends_entries(ctx.snapshot)):
        if entry is FriendsEntry.ADD_FRIEND:
            label = ADD_FRIEND_LABEL
        elif entry is FriendsEntry.REQUESTS:
            label = REQUESTS_LABEL.format(count=ctx.snapshot.pending_count)
        else:
            label = friend.display_name or friend.code
        lines.append(_row(label, ctx.is_selected(i)))
    if not ctx.snapshot.friends:
        lines.append("NO FRIENDS YET")
    return lines


def _render_add_friend(ctx: _Context) -> List[str]:
    add_friend = ctx.state.add_friend
    lines = ["ADD FRIEND", ""]
    if not add_friend.is_editing:
        lines += ["SELECT INPUT METHOD:", ""]
        lines += [_row(label, i == add_friend.method_index) for i, label in enumerate(ADD_FRIEND_METHODS)]
        lines.append("")
        if add_friend.paste_error:
            lines += ["ERROR: INVALID HEX", "TRY AGAIN", ""]
        return lines + ["▲/▼ SELECT METHOD", "SELECT: CHOOSE", "MENU: CANCEL"]

    code = "".join(
        f"[{char}]" if i == add_friend.digit_index else char
        for i, char in enumerate(add_friend.hex_digits)
    )
    return lines + [
        "ENTER HEX CODE:", "", code, "",
        "▲/▼ CHANGE DIGIT", "SELECT: NEXT/SEND", "BACK: PREVIOUS", "MENU: CANCEL",
    ]


def _render_friend_requests(ctx: _Context) -> List[str]:
    lines = ["FRIEND REQUESTS", ""]
    if not ctx.snapshot.pending_requests:
        return lines + ["NO PENDING REQUESTS"]
    lines += ["SELECT: ACCEPT", "BACK: REJECT", DIVIDER]
    for i, request in enumerate(ctx.snapshot.pending_requests):
        lines.append(_row(request.code, ctx.is_selected(i)))
    return lines


def _render_my_code(ctx: _Context) -> List[str]:
    return ["MY HEX CODE", "", ctx.own_code or "LOADING...", "", "SHARE THIS CODE", "WITH FRIENDS"]


def _render_settings(ctx: _Context) -> List[str]:
    lines = ["SETTINGS", ""]
    for i, (label, key) in enumerate(SETTINGS_ITEMS):
        text = f"{i + 1}. {label}"
        if key is not None and ctx.settings is not None:
            text += f": {'ON' if ctx.settings.get(key) else 'OFF'}"
        lines.append(_row(text, ctx.is_selected(i)))
    return lines


_RENDERERS: Dict[Screen, Callable[[_Context], List[str]]] = {
    Screen.MAIN: _render_main,
    Screen.MESSAGES: _render_messages,
    Screen.FRIENDS: _render_friends,
    Screen.ADD_FRIEND: _render_add_friend,
    Screen.FRIEND_REQUESTS: _render_friend_requests,
    Screen.MY_CODE: _render_my_code,
    Screen.SETTINGS: _render_settings,
}


def render_lines(
    state: NavigationState,
    snapshot: ListSnapshot,
    own_code: str = "",
    settings: Optional[SettingsStore] = None,
    error: Optional[str] = None,
) -> List[str]:
    """Text rows of the display for a state."""
    lines = _RENDERERS[state.screen](_Context(state, snapshot, own_code, settings))
    if error:
        lines += ["", f"! {error}"]
    return lines


class PagerDisplay(Static):
    """The pager's LCD panel."""

    DEFAULT_CSS = """
    PagerDisplay {
        background: #9CB4A8;
        color: #1A1A1A;
        border: tall #1A1A1A;
        padding: 1 2;
        width: 40;
        height: auto;
        min-height: 16;
    }
    """

    def show_lines(self, lines: List[str]) -> None:
        self.update("\n".join(lines))
