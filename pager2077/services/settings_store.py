"""
Pager preferences stored in the [pager] config section.
"""

from typing import Dict

from loguru import logger

from ..config import get_cli_setting, save_setting_to_cli_config

SECTION = "pager"


class ConfigSettingsStore:
    """SettingsStore that reads and persists through the config file."""

    def __init__(self):
        self._values: Dict[str, bool] = {}

    def get(self, key: str) -> bool:
        if key not in self._values:
            self._values[key] = bool(get_cli_setting(SECTION, key, True))
        return self._values[key]

    def toggle(self, key: str) -> bool:
        """Flip a preference and save it. Returns the new value."""
        value = not self.get(key)
        self._values[key] = value
        if not save_setting_to_cli_config(SECTION, key, value):
            logger.warning(f"Could not persist [{SECTION}].{key}; keeping it for this session only")
        return value
