"""
Navigation management module.
"""

from .dispatcher import InputEvent, Transition, apply_clipboard_result, dispatch
from .navigation_manager import NavigationManager
from .screen_registry import SCREEN_REGISTRY, ScreenRegistry

__all__ = [
    'InputEvent',
    'NavigationManager',
    'SCREEN_REGISTRY',
    'ScreenRegistry',
    'Transition',
    'apply_clipboard_result',
    'dispatch',
]
