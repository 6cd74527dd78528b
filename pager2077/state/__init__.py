"""
State management module for the pager client.
Provides the immutable navigation state and the list data it is bounded by.
"""

from .navigation_state import AddFriendMode, AddFriendState, NavigationState, Screen
from .list_data import Friend, ListSnapshot, PagerMessage, PendingRequest

__all__ = [
    'AddFriendMode',
    'AddFriendState',
    'NavigationState',
    'Screen',
    'Friend',
    'ListSnapshot',
    'PagerMessage',
    'PendingRequest',
]
