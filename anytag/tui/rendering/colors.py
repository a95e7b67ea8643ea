"""Color pair initialization and constants for TUI"""

import curses

from ...models import AT_TAG_COLOR, HASH_TAG_COLOR


class ColorPairs:
    """Color pair constants"""
    SELECTION = 1  # Black on cyan
    SUCCESS = 2  # Green on black
    HEADER = 5  # Cyan on black
    METADATA = 6  # White on black
    BORDER = 7  # Blue on black
    HASH_TAG_SELECTED = 9  # Magenta on cyan
    AT_TAG_SELECTED = 10  # Yellow on cyan
    HASH_TAG = HASH_TAG_COLOR  # Magenta on black
    AT_TAG = AT_TAG_COLOR  # Yellow on black

    SELECTED_VARIANTS = {
        HASH_TAG: HASH_TAG_SELECTED,
        AT_TAG: AT_TAG_SELECTED,
    }


def init_colors():
    """Initialize color pairs for the TUI"""
    curses.start_color()
    if curses.has_colors():
        # Selection / Highlight
        curses.init_pair(ColorPairs.SELECTION, curses.COLOR_BLACK, curses.COLOR_CYAN)
        # Flash messages / status line
        curses.init_pair(ColorPairs.SUCCESS, curses.COLOR_GREEN, curses.COLOR_BLACK)
        # Headers / Titles (bright cyan)
        curses.init_pair(ColorPairs.HEADER, curses.COLOR_CYAN, curses.COLOR_BLACK)
        # Metadata / Secondary text (dim)
        curses.init_pair(ColorPairs.METADATA, curses.COLOR_WHITE, curses.COLOR_BLACK)
        # Borders / Separators (blue)
        curses.init_pair(ColorPairs.BORDER, curses.COLOR_BLUE, curses.COLOR_BLACK)
        # Tags
        curses.init_pair(ColorPairs.HASH_TAG, curses.COLOR_MAGENTA, curses.COLOR_BLACK)
        curses.init_pair(ColorPairs.AT_TAG, curses.COLOR_YELLOW, curses.COLOR_BLACK)
        # Tags on selected background
        curses.init_pair(ColorPairs.HASH_TAG_SELECTED, curses.COLOR_MAGENTA, curses.COLOR_CYAN)
        curses.init_pair(ColorPairs.AT_TAG_SELECTED, curses.COLOR_YELLOW, curses.COLOR_CYAN)
