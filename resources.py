# resources.py
# English strings for the text and alt-text keys

from __future__ import annotations

APP_TITLE = "Lemonade"

STRINGS: dict[str, str] = {
    "lemon_select": "Tap the lemon tree to select a lemon",
    "lemon_squeeze": "Keep tapping the lemon to squeeze it",
    "lemon_drink": "Tap the lemonade to drink it",
    "lemon_empty_glass": "Tap the empty glass to start again",
    "lemon_tree_content_description": "Lemon tree",
    "lemon_content_description": "Lemon",
    "lemonade_content_description": "Glass of lemonade",
    "empty_glass_content_description": "Empty glass",
}


def get_string(key: str) -> str:
    # KeyError on unknown keys
    return STRINGS[key]
