"""Tag scanning logic for text buffers"""

from typing import Iterable, List

from .. import TagConfig, TagRange


class TagScanner:
    """Find marker-prefixed tags in a text snapshot"""

    @staticmethod
    def scan(text: str, config: TagConfig) -> List[TagRange]:
        """
        Scan text left to right for tags, consuming the longest valid run after each trigger

        Args:
            text: The text to scan (may be empty)
            config: Markers and extra body characters to recognise

        Returns:
            Non-overlapping tag ranges ordered by start offset. A trigger with no
            valid character after it yields a one-character range.
        """
        ranges = []
        index = 0
        length = len(text)

        while index < length:
            marker = config.marker_for(text[index])
            if marker is None:
                index += 1
                continue

            end = TagScanner._find_tag_end(text, index, config)
            ranges.append(TagRange(start=index, end=end, marker=marker))
            # Resume on the character that ended the tag, it may start the next one
            index = end

        return ranges

    @staticmethod
    def _find_tag_end(text: str, start: int, config: TagConfig) -> int:
        """Index of the first character after start that cannot continue the tag"""
        for index in range(start + 1, len(text)):
            if not config.is_tag_char(text[index]):
                return index
        return len(text)

    @staticmethod
    def distinct_tags(text: str, ranges: Iterable[TagRange], include_marker: bool = False) -> List[str]:
        """
        Tag strings for the given ranges with duplicates removed

        Returns:
            Unique tags in order of first occurrence
        """
        seen = set()
        tags = []
        for tag_range in ranges:
            tag = tag_range.text(text, include_marker)
            if tag not in seen:
                seen.add(tag)
                tags.append(tag)

        return tags
