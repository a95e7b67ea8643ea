import unittest

from anytag.buffer import Annotation, TextBuffer
from anytag.errors import UsageError


class TestAnnotation(unittest.TestCase):
    def test_clickable_requires_handler(self):
        with self.assertRaises(UsageError):
            Annotation(start=0, end=2, color=1, clickable=True)

    def test_empty_range_rejected(self):
        with self.assertRaises(ValueError):
            Annotation(start=2, end=2, color=1)

    def test_plain_annotation(self):
        a = Annotation(start=1, end=3, color=5)
        self.assertFalse(a.clickable)
        self.assertTrue(a.contains(1))
        self.assertFalse(a.contains(3))


class TestTextBuffer(unittest.TestCase):
    def setUp(self):
        self.buffer = TextBuffer("abc")
        self.seen = []
        self.buffer.add_text_changed_listener(self.seen.append)

    def test_set_text_notifies(self):
        self.buffer.set_text("xyz")
        self.assertEqual(self.buffer.text, "xyz")
        self.assertEqual(self.seen, ["xyz"])

    def test_insert_and_delete(self):
        self.buffer.insert(1, "--")
        self.buffer.delete(0, 1)
        self.assertEqual(self.seen, ["a--bc", "--bc"])
        self.assertEqual(len(self.buffer), 4)

    def test_insert_clamps_offset(self):
        self.buffer.insert(99, "!")
        self.assertEqual(self.buffer.text, "abc!")

    def test_empty_delete_does_not_notify(self):
        self.buffer.delete(2, 2)
        self.buffer.delete(5, 9)
        self.assertEqual(self.seen, [])

    def test_remove_listener(self):
        self.buffer.remove_text_changed_listener(self.seen.append)
        self.buffer.set_text("new")
        self.assertEqual(self.seen, [])

    def test_annotations(self):
        plain = Annotation(start=0, end=2, color=1)
        self.buffer.apply_annotation(plain)
        self.assertEqual(self.buffer.annotations, (plain,))
        self.assertEqual(self.buffer.annotations_at(1), [plain])
        self.assertEqual(self.buffer.annotations_at(2), [])
        self.buffer.clear_annotations()
        self.assertEqual(self.buffer.annotations, ())

    def test_click_routes_to_clickable_annotation(self):
        clicks = []

        def on_click(offset):
            clicks.append(offset)
            return True

        self.buffer.apply_annotation(Annotation(start=0, end=1, color=1))
        self.buffer.apply_annotation(Annotation(start=1, end=3, color=1, clickable=True, on_click=on_click))
        self.assertFalse(self.buffer.click(0))
        self.assertTrue(self.buffer.click(2))
        self.assertEqual(clicks, [2])

    def test_click_reports_unhandled(self):
        clicks = []
        self.buffer.apply_annotation(Annotation(start=0, end=3, color=1, clickable=True, on_click=clicks.append))
        self.assertFalse(self.buffer.click(1))
        self.assertEqual(clicks, [1])


if __name__ == '__main__':
    unittest.main()
