"""Text rendering utilities with annotation support"""

import curses
from typing import Iterable, List

from ...buffer import Annotation
from .colors import ColorPairs


class TextRenderer:
    """Utility class for rendering annotated text"""

    @staticmethod
    def safe_truncate(text, max_width, ellipsis="..."):
        """Truncate text to fit within max_width, ending with ellipsis when cut"""
        if not text:
            return text

        if len(text) <= max_width:
            return text

        if max_width <= len(ellipsis):
            return ellipsis[:max_width]

        return text[:max_width - len(ellipsis)] + ellipsis

    @staticmethod
    def visible_annotations(text: str, annotations: Iterable[Annotation]) -> List[Annotation]:
        """
        Annotations that can be drawn over text, ordered by start.
        Anything past the end of text or overlapping an earlier annotation is dropped.
        """
        visible = []
        last_end = 0
        for annotation in sorted(annotations, key=lambda a: a.start):
            if annotation.start < last_end or annotation.end > len(text):
                continue
            visible.append(annotation)
            last_end = annotation.end
        return visible

    @staticmethod
    def annotation_attr(annotation: Annotation, is_selected=False):
        color = annotation.color
        if is_selected:
            color = ColorPairs.SELECTED_VARIANTS.get(color, ColorPairs.SELECTION)
        attr = curses.color_pair(color)
        if annotation.clickable:
            attr |= curses.A_UNDERLINE
        return attr

    @staticmethod
    def display_annotated_line(screen, y, x_start, text, annotations, is_selected=False):
        """
        Display a line with its annotations highlighted.
        - Each annotation is drawn with its own color pair
        - Clickable annotations are underlined
        - Selection background is ColorPairs.SELECTION (cyan) for plain text
        """
        plain_attr = curses.color_pair(ColorPairs.SELECTION) if is_selected else curses.A_NORMAL

        x_pos = x_start
        last_pos = 0

        for annotation in TextRenderer.visible_annotations(text, annotations):
            # Add text before this annotation
            if annotation.start > last_pos:
                text_before = text[last_pos:annotation.start]
                screen.addstr(y, x_pos, text_before, plain_attr)
                x_pos += len(text_before)

            tag_text = text[annotation.start:annotation.end]
            screen.addstr(y, x_pos, tag_text, TextRenderer.annotation_attr(annotation, is_selected))
            x_pos += len(tag_text)
            last_pos = annotation.end

        # Add remaining text
        if last_pos < len(text):
            screen.addstr(y, x_pos, text[last_pos:], plain_attr)
