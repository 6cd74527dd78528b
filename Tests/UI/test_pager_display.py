"""Tests for the pager LCD text rendering."""

from conftest import MemorySettings, build_snapshot
from pager2077.UI.pager_display import render_lines
from pager2077.state.navigation_state import AddFriendMode, AddFriendState, NavigationState, Screen


def test_main_menu_marks_selection():
    lines = render_lines(NavigationState(selected_index=1), build_snapshot())
    assert lines[0] == "PAGER 2077"
    assert "> 2. FRIENDS" in lines
    assert "  1. MESSAGES" in lines


def test_friends_list_entries():
    lines = render_lines(NavigationState(screen=Screen.FRIENDS, selected_index=1), build_snapshot(friends=2, pending=3))
    assert lines[2:] == ["  + ADD FRIEND", "> * REQUESTS (3)", "  F1E2D3C4", "  B5A6C7D8"]


def test_friends_without_pending_or_friends():
    lines = render_lines(NavigationState(screen=Screen.FRIENDS), build_snapshot())
    assert "> + ADD FRIEND" in lines
    assert "NO FRIENDS YET" in lines
    assert not any("REQUESTS" in line for line in lines)


def test_add_friend_chooser_with_paste_error():
    state = NavigationState(screen=Screen.ADD_FRIEND, add_friend=AddFriendState(method_index=1, paste_error=True))
    lines = render_lines(state, build_snapshot())
    assert "  PASTE FROM CLIPBOARD" in lines
    assert "> MANUAL ENTRY" in lines
    assert "ERROR: INVALID HEX" in lines


def test_digit_editor_marks_cursor():
    add_friend = AddFriendState(mode=AddFriendMode.MANUAL, hex_digits="1A2B3C4D", digit_index=2)
    lines = render_lines(NavigationState(screen=Screen.ADD_FRIEND, add_friend=add_friend), build_snapshot())
    assert "1A[2]B3C4D" in lines


def test_friend_requests_and_empty_state():
    lines = render_lines(NavigationState(screen=Screen.FRIEND_REQUESTS), build_snapshot(pending=2))
    assert "SELECT: ACCEPT" in lines
    assert "> 0A1B2C3D" in lines
    empty = render_lines(NavigationState(screen=Screen.FRIEND_REQUESTS), build_snapshot())
    assert empty[-1] == "NO PENDING REQUESTS"


def test_messages_show_selected_text():
    lines = render_lines(NavigationState(screen=Screen.MESSAGES, selected_index=1), build_snapshot(messages=2))
    assert "> B5A6C7D8" in lines
    assert "MESSAGE 1" in lines
    assert render_lines(NavigationState(screen=Screen.MESSAGES), build_snapshot())[-1] == "NO MESSAGES"


def test_my_code_and_settings():
    assert "CAFEBABE" in render_lines(NavigationState(screen=Screen.MY_CODE), build_snapshot(), own_code="CAFEBABE")
    settings = MemorySettings(sound=False)
    lines = render_lines(NavigationState(screen=Screen.SETTINGS), build_snapshot(), settings=settings)
    assert lines[2:] == ["> 1. SOUND: OFF", "  2. VIBRATE: ON", "  3. ABOUT"]


def test_error_line_appended():
    lines = render_lines(NavigationState.initial(), build_snapshot(), error="REQUEST NOT FOUND")
    assert lines[-1] == "! REQUEST NOT FOUND"
