"""Tests for the screen registry and list bounds."""

import pytest

from conftest import build_snapshot
from pager2077.navigation.screen_registry import SCREEN_REGISTRY, FriendsEntry, ScreenRegistry
from pager2077.state.navigation_state import Screen


class TestScreenRegistry:

    def test_every_screen_registered(self):
        assert set(ScreenRegistry().list_screens()) == set(Screen)

    def test_main_menu_bounds(self):
        assert SCREEN_REGISTRY.max_index(Screen.MAIN, build_snapshot()) == 3

    def test_main_menu_targets(self):
        targets = [SCREEN_REGISTRY.main_menu_target(i) for i in range(4)]
        assert targets == [Screen.MESSAGES, Screen.FRIENDS, Screen.MY_CODE, Screen.SETTINGS]

    @pytest.mark.parametrize("friends", [0, 1, 3])
    def test_friends_without_requests_excludes_requests_entry(self, friends):
        snapshot = build_snapshot(friends=friends, pending=0)
        assert SCREEN_REGISTRY.max_index(Screen.FRIENDS, snapshot) == friends

    def test_friends_with_requests_includes_requests_entry(self):
        snapshot = build_snapshot(friends=3, pending=2)
        assert SCREEN_REGISTRY.max_index(Screen.FRIENDS, snapshot) == 4

    def test_friends_entries_order(self):
        snapshot = build_snapshot(friends=2, pending=1)
        kinds = [entry for entry, _friend in SCREEN_REGISTRY.friends_entries(snapshot)]
        assert kinds == [FriendsEntry.ADD_FRIEND, FriendsEntry.REQUESTS, FriendsEntry.FRIEND, FriendsEntry.FRIEND]

    def test_friends_entry_at_returns_friend(self):
        snapshot = build_snapshot(friends=2, pending=0)
        entry, friend = SCREEN_REGISTRY.friends_entry_at(2, snapshot)
        assert entry is FriendsEntry.FRIEND
        assert friend.code == snapshot.friends[1].code

    def test_empty_lists_have_negative_max(self):
        snapshot = build_snapshot()
        assert SCREEN_REGISTRY.max_index(Screen.MESSAGES, snapshot) == -1
        assert SCREEN_REGISTRY.max_index(Screen.FRIEND_REQUESTS, snapshot) == -1

    def test_fixed_screens(self):
        snapshot = build_snapshot(friends=5, pending=3, messages=4)
        assert SCREEN_REGISTRY.max_index(Screen.ADD_FRIEND, snapshot) == 0
        assert SCREEN_REGISTRY.max_index(Screen.MY_CODE, snapshot) == 0
        assert SCREEN_REGISTRY.max_index(Screen.SETTINGS, snapshot) == 2

    @pytest.mark.parametrize("index,expected", [(-3, 0), (0, 0), (1, 1), (9, 1)])
    def test_clamp(self, index, expected):
        snapshot = build_snapshot(messages=2)
        assert SCREEN_REGISTRY.clamp(Screen.MESSAGES, index, snapshot) == expected

    def test_clamp_pins_empty_list_at_zero(self):
        assert SCREEN_REGISTRY.clamp(Screen.MESSAGES, 4, build_snapshot()) == 0
