# Constants.py
# Description: Shared constants for the pager client.
#
#######################################################################################################################
#
# Hex codes

HEX_ALPHABET = "0123456789ABCDEF"
HEX_CODE_LENGTH = 8
EMPTY_HEX_CODE = "0" * HEX_CODE_LENGTH
LAST_DIGIT_INDEX = HEX_CODE_LENGTH - 1

# --- Add friend input methods ---
METHOD_PASTE = 0
METHOD_MANUAL = 1
ADD_FRIEND_METHODS = ("PASTE FROM CLIPBOARD", "MANUAL ENTRY")

# --- Main menu (label, target screen value) ---
MAIN_MENU_ITEMS = (
    ("1. MESSAGES", "messages"),
    ("2. FRIENDS", "friends"),
    ("3. MY HEX", "my_code"),
    ("4. SETTINGS", "settings"),
)

# --- Settings screen (label, [pager] config key or None) ---
SETTINGS_ITEMS = (
    ("SOUND", "sound"),
    ("VIBRATE", "vibrate"),
    ("ABOUT", None),
)

# --- Friends screen fixed entries ---
ADD_FRIEND_LABEL = "+ ADD FRIEND"
REQUESTS_LABEL = "* REQUESTS ({count})"

APP_TITLE = "PAGER 2077"

#
# End of Constants.py
#######################################################################################################################
