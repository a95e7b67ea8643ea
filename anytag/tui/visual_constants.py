"""Visual constants for consistent TUI layout and styling"""


class Layout:
    """Screen layout constants"""
    HEADER_Y = 0
    HEADER_X = 2
    CONTENT_INDENT = 4
    EDITOR_Y = 3
    DISPLAY_Y = 7
    TAG_LIST_Y = 11
    HELP_OFFSET_FROM_BOTTOM = 3
    BORDER_OFFSET_FROM_BOTTOM = 2
    STATUS_LINE_OFFSET_FROM_BOTTOM = 1


class Icons:
    """Unicode symbols used throughout UI"""
    DIAMOND = "◆"
    ARROW_RIGHT = "▸"
    HASH = "⌗"
    VERIFIED = "✓"
    SEPARATOR_H = "─"


class Timing:
    """Timing constants"""
    FLASH_MESSAGE_DURATION = 3  # seconds
