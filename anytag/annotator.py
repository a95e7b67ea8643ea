"""Keeps the tag annotations of one text source in sync with its content"""

import logging
from collections.abc import Mapping
from typing import Any, Callable, Dict, List, Optional, Tuple

from .buffer import Annotation
from .errors import UsageError
from .models import AT, HASH, AnnotatedText, Marker, TagConfig, TagRange
from .models.extractors import TagScanner

logger = logging.getLogger(__name__)


class TagAnnotator:
    """
    Highlights '#tags' and '@tags' in a single text source and reports clicks on them.

    The source must provide:
        - a ``text`` attribute with the current content
        - ``add_text_changed_listener(callback)``, called with the full new text
        - ``apply_annotation(annotation)`` and ``clear_annotations()``

    A listener is either an object with ``on_hash_tag_activated(tag)`` and
    ``on_at_tag_activated(tag)`` methods (``on_<marker name>_tag_activated`` for
    custom markers) or a mapping of marker (or marker name) to callback.
    Callbacks receive the tag without its trigger character.

    Not thread safe: call everything from the thread that edits the source.
    """

    def __init__(self, config: Optional[TagConfig] = None):
        self.config = config or TagConfig()
        self._source = None
        self._annotated = AnnotatedText()
        self._listener = None
        self._callbacks: Dict[str, Callable[[str], Any]] = {}

    def attach(self, source):
        """Bind to a text source, annotate its current content and follow its changes"""
        if self._source is not None:
            raise UsageError("TagAnnotator is already attached to a text source. "
                             "You need to create a unique TagAnnotator for every text source")
        self._source = source
        logger.debug("Attached to %r", source)

        self.on_text_mutated(source.text)
        source.add_text_changed_listener(self.on_text_mutated)

    @property
    def attached(self) -> bool:
        return self._source is not None

    def on_text_mutated(self, new_text: str):
        """Drop every annotation and rebuild them from new_text"""
        if self._source is not None:
            self._source.clear_annotations()

        ranges = TagScanner.scan(new_text, self.config) if new_text else []
        self._annotated = AnnotatedText(text=new_text, ranges=ranges)
        logger.debug("Rescanned %d chars, found %d tags", len(new_text), len(ranges))

        if self._source is not None:
            for tag_range in ranges:
                self._source.apply_annotation(self._annotation_for(tag_range))

    def rescan(self):
        """Re-annotate the attached source, e.g. after the click listener changed"""
        if self._source is not None:
            self.on_text_mutated(self._source.text)

    def _annotation_for(self, tag_range: TagRange) -> Annotation:
        clickable = self._listener is not None
        return Annotation(
            start=tag_range.start,
            end=tag_range.end,
            color=tag_range.marker.color,
            clickable=clickable,
            on_click=self.activate if clickable else None,
        )

    @property
    def annotated_text(self) -> AnnotatedText:
        return self._annotated

    @property
    def ranges(self) -> Tuple[TagRange, ...]:
        return tuple(self._annotated.ranges)

    def activate(self, offset: int) -> bool:
        """
        Handle a click at offset.

        Returns:
            True if a listener callback was invoked. Offsets outside every tag,
            or a missing listener, are ignored.
        """
        tag_range = self._annotated.range_at(offset)
        if tag_range is None:
            logger.debug("Ignoring activation at %d: no tag there", offset)
            return False

        callback = self._callbacks.get(tag_range.marker.name)
        if callback is None:
            logger.debug("Ignoring activation of %s tag: no listener", tag_range.marker.name)
            return False

        tag = tag_range.text(self._annotated.text, include_marker=False)
        logger.debug("Dispatching %s tag %r", tag_range.marker.name, tag)
        callback(tag)
        return True

    def set_tag_click_listener(self, listener):
        """
        Register the object that receives tag clicks, or None to stop receiving them.

        Only annotations applied after this call pick up the new clickability;
        call rescan() to refresh the current ones.
        """
        self._listener = listener
        self._callbacks = self._callbacks_from(listener)

    def _callbacks_from(self, listener) -> Dict[str, Callable[[str], Any]]:
        if listener is None:
            return {}
        if isinstance(listener, Mapping):
            # Keys may be Marker objects or marker names
            return {(key.name if isinstance(key, Marker) else key): callback
                    for key, callback in listener.items()}

        callbacks = {}
        for marker in self.config.markers:
            callback = getattr(listener, f"on_{marker.name}_tag_activated", None)
            if callback is not None:
                callbacks[marker.name] = callback
        return callbacks

    def query_tags(self, marker: Marker, include_marker: bool = False) -> List[str]:
        """Distinct tags of one marker type in order of first appearance"""
        return TagScanner.distinct_tags(
            self._annotated.text,
            self._annotated.ranges_for(marker),
            include_marker,
        )

    def get_all_hash_tags(self, include_marker: bool = False) -> List[str]:
        return self.query_tags(self.config.marker_named(HASH.name) or HASH, include_marker)

    def get_all_at_tags(self, include_marker: bool = False) -> List[str]:
        return self.query_tags(self.config.marker_named(AT.name) or AT, include_marker)


def create_annotator(hash_color: int, at_color: int, *additional_tag_chars: str) -> TagAnnotator:
    """
    Build an annotator for '#' and '@' tags.

    Example:
        create_annotator(HASH_TAG_COLOR, AT_TAG_COLOR, '_', '$') highlights
        "#this_is_a$tag" as a single tag, without the extras only "#this".
    """
    return TagAnnotator(TagConfig.from_options(hash_color, at_color, additional_tag_chars))
