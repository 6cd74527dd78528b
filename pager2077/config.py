# pager2077/config.py
# Description: Configuration management for the pager client.
#
# Imports
import copy
import os
import sys
if sys.version_info < (3, 11):
    import tomli as tomllib
else:
    import tomllib
from pathlib import Path
from typing import Any, Dict, Optional
#
# Third-Party Imports
import toml
from loguru import logger
#
# Local Imports
from .Utils.hex_code import generate_hex_code, is_valid_hex_code
#
#######################################################################################################################
#
# Functions:

# --- Path to the configuration file ---
DEFAULT_CONFIG_PATH = Path(
    os.environ.get("PAGER2077_CONFIG", Path.home() / ".config" / "pager2077" / "config.toml")
)

CONFIG_TOML_CONTENT = """
# Configuration for the pager client
[general]
app_title = "PAGER 2077"

[identity]
# Your own 8-character friend code. Generated on first run when empty.
hex_code = ""

[pager]
sound = true
vibrate = true

[clipboard]
timeout_seconds = 2.0

[logging]
log_level = "INFO"
log_filename = "pager2077.log"
console = false
"""

DEFAULT_CONFIG_FROM_TOML: Dict[str, Any] = tomllib.loads(CONFIG_TOML_CONTENT)


def deep_merge_dicts(base: Dict, update: Dict) -> Dict:
    """Recursively merges update_dict into base_dict."""
    merged = copy.deepcopy(base)
    for key, value in update.items():
        if isinstance(value, dict) and key in merged and isinstance(merged[key], dict):
            merged[key] = deep_merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


# --- Primary Configuration Loading Logic ---
_CONFIG_CACHE: Optional[Dict[str, Any]] = None


def load_cli_config_and_ensure_existence(force_reload: bool = False) -> Dict[str, Any]:
    """
    Loads settings from the config file.
    If the file doesn't exist, it's created from CONFIG_TOML_CONTENT.
    The defaults from CONFIG_TOML_CONTENT are always used as the base.
    """
    global _CONFIG_CACHE
    if _CONFIG_CACHE is not None and not force_reload:
        return _CONFIG_CACHE

    loaded_config = copy.deepcopy(DEFAULT_CONFIG_FROM_TOML)

    if not DEFAULT_CONFIG_PATH.exists():
        logger.info(f"Config file not found at {DEFAULT_CONFIG_PATH}. Creating with default values.")
        try:
            DEFAULT_CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
            with open(DEFAULT_CONFIG_PATH, "w", encoding="utf-8") as f:
                f.write(CONFIG_TOML_CONTENT)
            logger.info(f"Created default config file at {DEFAULT_CONFIG_PATH}")
        except OSError as e:
            logger.error(f"Could not create default config file {DEFAULT_CONFIG_PATH}: {e}. Using internal defaults.")
    else:
        logger.info(f"Loading config from: {DEFAULT_CONFIG_PATH}")
        try:
            with open(DEFAULT_CONFIG_PATH, "rb") as f:
                user_config_from_file = tomllib.load(f)
            loaded_config = deep_merge_dicts(loaded_config, user_config_from_file)
        except tomllib.TOMLDecodeError as e:
            logger.error(f"Error decoding TOML config file {DEFAULT_CONFIG_PATH}: {e}. Using internal defaults.")
        except OSError as e:
            logger.error(f"Could not read config file {DEFAULT_CONFIG_PATH}: {e}. Using internal defaults.")

    _CONFIG_CACHE = loaded_config
    logger.debug(f"Config loaded with sections: {list(loaded_config.keys())}")
    return _CONFIG_CACHE


def save_setting_to_cli_config(section: str, key: str, value: Any) -> bool:
    """
    Saves a specific setting to the TOML configuration file.

    Reads the current file, updates the key within the (possibly nested)
    section, writes it back and reloads the cache.

    Args:
        section: The name of the TOML section (e.g., "pager", "identity").
        key: The key within the section to update.
        value: The new value for the key.

    Returns:
        True if the setting was saved successfully, False otherwise.
    """
    global _CONFIG_CACHE
    logger.info(f"Saving setting: [{section}].{key} = {value!r}")

    try:
        DEFAULT_CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error(f"Could not create config directory {DEFAULT_CONFIG_PATH.parent}: {e}")
        return False

    config_data: Dict[str, Any] = {}
    if DEFAULT_CONFIG_PATH.exists():
        try:
            with open(DEFAULT_CONFIG_PATH, "rb") as f:
                config_data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            logger.error(f"Corrupted config file at {DEFAULT_CONFIG_PATH}. Cannot save. Error: {e}")
            return False
        except OSError as e:
            logger.error(f"Unexpected error reading {DEFAULT_CONFIG_PATH}: {e}")
            return False

    current_level = config_data
    try:
        for part in section.split('.'):
            current_level = current_level.setdefault(part, {})
        current_level[key] = value
    except (TypeError, AttributeError):
        logger.error(
            f"Configuration structure conflict. Could not set '{key}' in section '{section}' "
            f"because a part of the path is not a table."
        )
        return False

    try:
        with open(DEFAULT_CONFIG_PATH, "w", encoding="utf-8") as f:
            toml.dump(config_data, f)
        logger.success(f"Saved setting to {DEFAULT_CONFIG_PATH}")
    except OSError as e:
        logger.error(f"Failed to write updated config to {DEFAULT_CONFIG_PATH}: {e}")
        return False

    _CONFIG_CACHE = None
    load_cli_config_and_ensure_existence(force_reload=True)
    return True


# --- Setting Getter ---
def get_cli_setting(section: str, key: str, default: Any = None) -> Any:
    """Helper to get a specific setting from the loaded configuration."""
    config = load_cli_config_and_ensure_existence()
    section_data = config.get(section)
    if isinstance(section_data, dict):
        return section_data.get(key, default)
    return default


def get_own_hex_code() -> str:
    """Return this user's hex code, generating and saving one if missing."""
    code = str(get_cli_setting("identity", "hex_code", "") or "").upper()
    if is_valid_hex_code(code):
        return code

    if code:
        logger.warning(f"Ignoring invalid identity hex code in config: {code!r}")
    code = generate_hex_code()
    if not save_setting_to_cli_config("identity", "hex_code", code):
        logger.warning("Generated hex code could not be saved; it will change next session")
    return code


def get_clipboard_timeout() -> float:
    """Seconds to wait on the clipboard before treating the read as failed."""
    value = get_cli_setting("clipboard", "timeout_seconds", 2.0)
    try:
        return max(0.1, float(value))
    except (TypeError, ValueError):
        logger.warning(f"Invalid clipboard timeout {value!r}, using 2.0")
        return 2.0


def get_cli_log_file_path() -> Path:
    """Log file lives next to the config file."""
    default_log_filename = DEFAULT_CONFIG_FROM_TOML.get("logging", {}).get("log_filename", "pager2077.log")
    log_filename = get_cli_setting("logging", "log_filename", default_log_filename)
    log_file_path = DEFAULT_CONFIG_PATH.parent / log_filename
    try:
        log_file_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error(f"Could not create log directory {log_file_path.parent}: {e}")
    return log_file_path

#
# End of config.py
#######################################################################################################################
