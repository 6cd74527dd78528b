"""Tests for the immutable navigation state records."""

import dataclasses

import pytest

from pager2077.state.navigation_state import AddFriendMode, AddFriendState, NavigationState, Screen


class TestNavigationState:
    """Invariants of NavigationState."""

    def test_initial_state(self):
        state = NavigationState.initial()
        assert state.screen is Screen.MAIN
        assert state.selected_index == 0
        assert state.add_friend is None

    def test_state_is_frozen(self):
        state = NavigationState.initial()
        with pytest.raises(dataclasses.FrozenInstanceError):
            state.selected_index = 2

    def test_negative_index_rejected(self):
        with pytest.raises(ValueError):
            NavigationState(screen=Screen.MAIN, selected_index=-1)

    def test_add_friend_required_on_add_friend_screen(self):
        with pytest.raises(ValueError):
            NavigationState(screen=Screen.ADD_FRIEND)

    def test_add_friend_forbidden_elsewhere(self):
        with pytest.raises(ValueError):
            NavigationState(screen=Screen.FRIENDS, add_friend=AddFriendState())

    def test_go_to_add_friend_creates_fresh_sub_state(self):
        state = NavigationState(screen=Screen.FRIENDS, selected_index=3).go_to(Screen.ADD_FRIEND)
        assert state.selected_index == 0
        assert state.add_friend == AddFriendState(
            mode=AddFriendMode.CHOOSING, hex_digits="00000000", digit_index=0, method_index=0, paste_error=False
        )

    def test_leaving_add_friend_discards_sub_state(self):
        state = NavigationState.initial().go_to(Screen.ADD_FRIEND).go_to(Screen.FRIENDS)
        assert state.add_friend is None

    def test_with_index_returns_new_object(self):
        state = NavigationState.initial()
        moved = state.with_index(2)
        assert moved.selected_index == 2
        assert state.selected_index == 0


class TestAddFriendState:
    """Invariants of AddFriendState."""

    @pytest.mark.parametrize("digits", ["0000000", "000000000", "0000000g", "abcdef01"])
    def test_hex_digits_must_be_eight_upper_hex(self, digits):
        with pytest.raises(ValueError):
            AddFriendState(hex_digits=digits)

    @pytest.mark.parametrize("index", [-1, 8])
    def test_digit_index_range(self, index):
        with pytest.raises(ValueError):
            AddFriendState(digit_index=index)

    def test_method_index_range(self):
        with pytest.raises(ValueError):
            AddFriendState(method_index=2)

    def test_current_digit(self):
        state = AddFriendState(hex_digits="1A2B3C4D", digit_index=3)
        assert state.current_digit == "B"

    def test_is_editing(self):
        assert not AddFriendState().is_editing
        assert AddFriendState(mode=AddFriendMode.MANUAL).is_editing
        assert AddFriendState(mode=AddFriendMode.PASTE_RESULT).is_editing
