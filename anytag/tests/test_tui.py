import curses
import unittest
from unittest import mock

from anytag.buffer import Annotation
from anytag.tui.demo import KEY_CTRL_A, KEY_CTRL_T, KEY_ESC, KEY_TAB, TagDemo
from anytag.tui.rendering import ColorPairs, TextRenderer


def fake_color_pair(n):
    return n << 8


class FakeScreen:
    def __init__(self, height=24, width=80):
        self.height = height
        self.width = width
        self.calls = []

    def getmaxyx(self):
        return self.height, self.width

    def addstr(self, y, x, text, attr=0):
        self.calls.append((y, x, text, attr))

    def erase(self):
        self.calls = []

    def move(self, y, x):
        pass

    def refresh(self):
        pass

    def text_at(self, y):
        return "".join(text for row, _, text, _ in sorted(self.calls, key=lambda c: (c[0], c[1])) if row == y)


@mock.patch("curses.color_pair", side_effect=fake_color_pair)
class TestTextRenderer(unittest.TestCase):
    def test_plain_line(self, _):
        screen = FakeScreen()
        TextRenderer.display_annotated_line(screen, 0, 2, "no tags", [])
        self.assertEqual(screen.calls, [(0, 2, "no tags", curses.A_NORMAL)])

    def test_annotated_segments(self, _):
        screen = FakeScreen()
        annotations = [
            Annotation(start=4, end=10, color=ColorPairs.HASH_TAG),
            Annotation(start=11, end=13, color=ColorPairs.AT_TAG, clickable=True, on_click=print),
        ]
        TextRenderer.display_annotated_line(screen, 1, 0, "see #topic @u!", annotations)
        self.assertEqual(screen.calls, [
            (1, 0, "see ", curses.A_NORMAL),
            (1, 4, "#topic", fake_color_pair(ColorPairs.HASH_TAG)),
            (1, 10, " ", curses.A_NORMAL),
            (1, 11, "@u", fake_color_pair(ColorPairs.AT_TAG) | curses.A_UNDERLINE),
            (1, 13, "!", curses.A_NORMAL),
        ])

    def test_selected_uses_selected_variants(self, _):
        screen = FakeScreen()
        annotations = [Annotation(start=0, end=2, color=ColorPairs.HASH_TAG)]
        TextRenderer.display_annotated_line(screen, 0, 0, "#a b", annotations, is_selected=True)
        self.assertEqual(screen.calls[0][3], fake_color_pair(ColorPairs.HASH_TAG_SELECTED))
        self.assertEqual(screen.calls[1][3], fake_color_pair(ColorPairs.SELECTION))

    def test_skips_overlapping_and_out_of_range(self, _):
        annotations = [
            Annotation(start=0, end=3, color=1),
            Annotation(start=2, end=4, color=1),
            Annotation(start=5, end=20, color=1),
        ]
        visible = TextRenderer.visible_annotations("#abc de", annotations)
        self.assertEqual(visible, [annotations[0]])


class TestSafeTruncate(unittest.TestCase):
    def test_fits(self):
        self.assertEqual(TextRenderer.safe_truncate("short", 10), "short")

    def test_truncates_with_ellipsis(self):
        self.assertEqual(TextRenderer.safe_truncate("0123456789", 8), "01234...")

    def test_tiny_width(self):
        self.assertEqual(TextRenderer.safe_truncate("0123456789", 2), "..")


def type_text(demo, text):
    for ch in text:
        demo.handle_input(ord(ch))


class TestTagDemo(unittest.TestCase):
    def setUp(self):
        self.demo = TagDemo()

    def test_typing_highlights_editor(self):
        type_text(self.demo, "#a @b")
        self.assertEqual(self.demo.editor.text, "#a @b")
        self.assertEqual(len(self.demo.editor.annotations), 2)
        self.assertFalse(self.demo.editor.annotations[0].clickable)

    def test_enter_copies_to_display(self):
        type_text(self.demo, "#x_y @me")
        self.demo.handle_input(10)
        self.assertEqual(self.demo.display.text, "#x_y @me")
        self.assertEqual(self.demo.editor_helper.get_all_hash_tags(), ["x"])
        self.assertEqual(self.demo.display_helper.get_all_hash_tags(), ["x_y"])

    def test_list_tags(self):
        type_text(self.demo, "#one #two #one @me")
        self.demo.handle_input(10)
        self.demo.handle_input(KEY_CTRL_T)
        self.assertEqual(self.demo.tag_list, "['one', 'two']")
        self.demo.handle_input(KEY_CTRL_A)
        self.assertEqual(self.demo.tag_list, "['me']")

    def test_click_in_display(self):
        type_text(self.demo, "hi @bob")
        self.demo.handle_input(10)
        self.demo.handle_input(KEY_TAB)
        for _ in range(4):
            self.demo.handle_input(curses.KEY_RIGHT)
        self.demo.handle_input(10)
        self.assertEqual(self.demo.flash_message, "Clicked AtTag: bob")

    def test_click_outside_tag(self):
        type_text(self.demo, "hi #bob")
        self.demo.handle_input(10)
        self.demo.handle_input(KEY_TAB)
        self.demo.handle_input(10)
        self.assertEqual(self.demo.flash_message, "")

    def test_display_is_read_only(self):
        self.demo.handle_input(KEY_TAB)
        type_text(self.demo, "#x")
        self.assertEqual(self.demo.display.text, "")

    def test_display_ignores_deletes(self):
        type_text(self.demo, "#ab")
        self.demo.handle_input(10)
        self.demo.handle_input(KEY_TAB)
        self.demo.handle_input(curses.KEY_END)
        self.demo.handle_input(curses.KEY_BACKSPACE)
        self.demo.handle_input(curses.KEY_HOME)
        self.demo.handle_input(curses.KEY_DC)
        self.assertEqual(self.demo.display.text, "#ab")
        self.assertEqual(self.demo.cursors["display"], 0)
        self.assertEqual(self.demo.display_helper.get_all_hash_tags(), ["ab"])

    def test_editing_keys(self):
        type_text(self.demo, "#abc")
        self.demo.handle_input(curses.KEY_BACKSPACE)
        self.demo.handle_input(curses.KEY_HOME)
        self.demo.handle_input(curses.KEY_DC)
        self.assertEqual(self.demo.editor.text, "ab")
        self.assertEqual(self.demo.editor_helper.get_all_hash_tags(), [])
        self.demo.handle_input(curses.KEY_END)
        type_text(self.demo, " #c")
        self.assertEqual(self.demo.editor_helper.get_all_hash_tags(), ["c"])

    def test_escape_quits(self):
        self.assertFalse(self.demo.handle_input(KEY_ESC))
        self.assertTrue(self.demo.handle_input(KEY_TAB))

    @mock.patch("curses.color_pair", side_effect=fake_color_pair)
    def test_draw(self, _):
        screen = FakeScreen()
        self.demo.stdscr = screen
        type_text(self.demo, "#a b")
        self.demo.handle_input(10)
        self.demo.draw()

        self.assertEqual(screen.text_at(4), "#a b")
        self.assertEqual(screen.text_at(8), "#a b")
        self.assertIn("1 tags in display", screen.text_at(23))


if __name__ == '__main__':
    unittest.main()
