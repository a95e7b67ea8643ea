"""In-memory text buffer that reports changes and carries visual annotations"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from .errors import UsageError


@dataclass(frozen=True)
class Annotation:
    """A colored span over [start, end) of a buffer, optionally clickable"""
    start: int
    end: int
    color: int
    clickable: bool = False
    on_click: Optional[Callable[[int], bool]] = None

    def __post_init__(self):
        if self.start >= self.end:
            raise ValueError(f"Annotation range [{self.start}, {self.end}) is empty")
        if self.clickable and self.on_click is None:
            raise UsageError("Clickable annotation created without a click handler. "
                             "Are you sure it needs to be clickable?")

    def contains(self, offset: int) -> bool:
        return self.start <= offset < self.end


class TextBuffer:
    """
    Editable text with change listeners and an annotation layer.

    Every mutation notifies listeners with the full new text. Annotations are
    not adjusted on edits; whoever applied them is expected to rebuild them
    from the change notification.
    """

    def __init__(self, text: str = ""):
        self._text = text
        self._listeners: List[Callable[[str], None]] = []
        self._annotations: List[Annotation] = []

    @property
    def text(self) -> str:
        return self._text

    def __len__(self):
        return len(self._text)

    def set_text(self, text: str):
        self._text = text
        self._notify()

    def insert(self, offset: int, chars: str):
        offset = max(0, min(offset, len(self._text)))
        self._text = self._text[:offset] + chars + self._text[offset:]
        self._notify()

    def delete(self, start: int, end: int):
        start = max(0, start)
        end = min(end, len(self._text))
        if start >= end:
            return
        self._text = self._text[:start] + self._text[end:]
        self._notify()

    def add_text_changed_listener(self, listener: Callable[[str], None]):
        self._listeners.append(listener)

    def remove_text_changed_listener(self, listener: Callable[[str], None]):
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self):
        # Listeners may unsubscribe while being notified
        for listener in list(self._listeners):
            listener(self._text)

    @property
    def annotations(self) -> Tuple[Annotation, ...]:
        return tuple(self._annotations)

    def apply_annotation(self, annotation: Annotation):
        self._annotations.append(annotation)

    def clear_annotations(self):
        self._annotations.clear()

    def annotations_at(self, offset: int) -> List[Annotation]:
        return [a for a in self._annotations if a.contains(offset)]

    def click(self, offset: int) -> bool:
        """
        Send a click at offset to the first clickable annotation under it.

        Returns:
            True if that annotation's handler reported the click as handled
        """
        for annotation in self.annotations_at(offset):
            if annotation.clickable:
                return bool(annotation.on_click(offset))
        return False
