"""Interactive curses demo: type tags, copy them to a clickable view, list them"""

import curses
import logging
import time

from ..annotator import create_annotator
from ..buffer import TextBuffer
from .rendering import ColorPairs, TextRenderer, init_colors
from .visual_constants import Icons, Layout, Timing

logger = logging.getLogger(__name__)

KEY_TAB = 9
KEY_ESC = 27
KEY_CTRL_A = 1
KEY_CTRL_T = 20

# Extra characters accepted in tags of the display view.
# "#hash_tag_with_underscore_and$dollar$sign" is one tag there.
DISPLAY_TAG_CHARS = ('_', '$')


class TagDemo:
    """
    Two buffers: an editor where tags are only highlighted, and a display view
    that accepts '_' and '$' inside tags and reports clicks.
    """

    def __init__(self, stdscr=None):
        self.stdscr = stdscr

        self.editor = TextBuffer()
        self.display = TextBuffer()

        self.editor_helper = create_annotator(ColorPairs.HASH_TAG, ColorPairs.AT_TAG)
        self.editor_helper.attach(self.editor)

        self.display_helper = create_annotator(ColorPairs.HASH_TAG, ColorPairs.AT_TAG, *DISPLAY_TAG_CHARS)
        self.display_helper.set_tag_click_listener(self)
        self.display_helper.attach(self.display)

        self.focus = "editor"  # editor, display
        self.cursors = {"editor": 0, "display": 0}
        self.tag_list = ""

        self.flash_message = ""
        self.flash_time = 0

    def show_message(self, msg):
        self.flash_message = msg
        self.flash_time = time.time()

    def on_hash_tag_activated(self, tag):
        logger.info("Hash tag clicked [%s]", tag)
        self.show_message(f"Clicked HashTag: {tag}")

    def on_at_tag_activated(self, tag):
        logger.info("At tag clicked [%s]", tag)
        self.show_message(f"Clicked AtTag: {tag}")

    @property
    def focused_buffer(self) -> TextBuffer:
        return self.editor if self.focus == "editor" else self.display

    def handle_input(self, key):
        """Apply one key press. Returns False when the demo should exit."""
        if key == KEY_ESC:
            return False

        if key == KEY_TAB:
            self.focus = "display" if self.focus == "editor" else "editor"
            return True

        if key == KEY_CTRL_T:
            self.tag_list = str(self.display_helper.get_all_hash_tags())
            return True

        if key == KEY_CTRL_A:
            self.tag_list = str(self.display_helper.get_all_at_tags())
            return True

        buffer = self.focused_buffer
        cursor = self.cursors[self.focus]
        # Only the editor accepts edits, the display just moves and clicks
        editable = self.focus == "editor"

        if key in (10, 13, curses.KEY_ENTER):
            if self.focus == "editor":
                self.display.set_text(self.editor.text)
                self.cursors["display"] = 0
            else:
                buffer.click(cursor)

        elif key in (curses.KEY_BACKSPACE, 127, 8):
            if editable and cursor > 0:
                buffer.delete(cursor - 1, cursor)
                cursor -= 1

        elif key == curses.KEY_DC:
            if editable:
                buffer.delete(cursor, cursor + 1)

        elif key == curses.KEY_LEFT:
            cursor = max(0, cursor - 1)

        elif key == curses.KEY_RIGHT:
            cursor = min(len(buffer), cursor + 1)

        elif key == curses.KEY_HOME:
            cursor = 0

        elif key == curses.KEY_END:
            cursor = len(buffer)

        elif 32 <= key <= 126 and editable:
            buffer.insert(cursor, chr(key))
            cursor += 1

        self.cursors[self.focus] = cursor
        return True

    def draw(self):
        height, width = self.stdscr.getmaxyx()
        self.stdscr.erase()

        try:
            self.stdscr.addstr(Layout.HEADER_Y, Layout.HEADER_X, f"{Icons.DIAMOND} anytag demo",
                               curses.color_pair(ColorPairs.HEADER) | curses.A_BOLD)
        except curses.error:
            pass

        self._draw_field(Layout.EDITOR_Y, "Editor", self.editor, self.editor_helper, width)
        self._draw_field(Layout.DISPLAY_Y, "Display (clickable)", self.display, self.display_helper, width)

        try:
            self.stdscr.addstr(Layout.TAG_LIST_Y, Layout.HEADER_X, f"{Icons.HASH} Tags: {self.tag_list}",
                               curses.color_pair(ColorPairs.METADATA))
            help_text = "[Tab] Focus  [Enter] Copy / Click  [^T] #tags  [^A] @tags  [Esc] Quit"
            self.stdscr.addstr(height - Layout.HELP_OFFSET_FROM_BOTTOM, Layout.HEADER_X,
                               TextRenderer.safe_truncate(help_text, width - 4), curses.A_DIM)
            self.stdscr.addstr(height - Layout.BORDER_OFFSET_FROM_BOTTOM, 0, Icons.SEPARATOR_H * (width - 1),
                               curses.color_pair(ColorPairs.BORDER))
        except curses.error:
            pass

        self._draw_status_bar(height, width)
        self._place_cursor()
        self.stdscr.refresh()

    def _draw_field(self, y, title, buffer, helper, width):
        marker = Icons.ARROW_RIGHT if self.focused_buffer is buffer else " "
        try:
            self.stdscr.addstr(y, Layout.HEADER_X, f"{marker} {title}", curses.color_pair(ColorPairs.HEADER))
            max_len = width - Layout.CONTENT_INDENT - 1
            TextRenderer.display_annotated_line(self.stdscr, y + 1, Layout.CONTENT_INDENT,
                                                buffer.text[:max_len], buffer.annotations)
        except curses.error:
            pass

    def _draw_status_bar(self, height, width):
        if self.flash_message and (time.time() - self.flash_time < Timing.FLASH_MESSAGE_DURATION):
            status_text = f"{Icons.VERIFIED} {self.flash_message}"
        else:
            status_text = f"{len(self.display_helper.ranges)} tags in display"
        try:
            self.stdscr.addstr(height - Layout.STATUS_LINE_OFFSET_FROM_BOTTOM, 1,
                               TextRenderer.safe_truncate(status_text, width - 2),
                               curses.color_pair(ColorPairs.SUCCESS))
        except curses.error:
            pass

    def _place_cursor(self):
        y = Layout.EDITOR_Y + 1 if self.focus == "editor" else Layout.DISPLAY_Y + 1
        try:
            self.stdscr.move(y, Layout.CONTENT_INDENT + self.cursors[self.focus])
        except curses.error:
            pass

    def run(self):
        curses.curs_set(1)
        init_colors()
        while True:
            self.draw()
            key = self.stdscr.getch()
            if not self.handle_input(key):
                break


def run_demo():
    """Run the demo in the current terminal"""
    def demo_wrapper(stdscr):
        TagDemo(stdscr).run()

    curses.wrapper(demo_wrapper)


if __name__ == "__main__":
    run_demo()
