"""Data models for anytag"""

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, List, Optional, Tuple

HASH_TAG_COLOR = 11
AT_TAG_COLOR = 12


@dataclass(frozen=True)
class Marker:
    """A tag family: the trigger character and how its tags are drawn"""
    name: str
    trigger: str
    color: int

    def __post_init__(self):
        if len(self.trigger) != 1:
            raise ValueError(f"Marker trigger must be a single character, got {self.trigger!r}")


HASH = Marker(name="hash", trigger="#", color=HASH_TAG_COLOR)
AT = Marker(name="at", trigger="@", color=AT_TAG_COLOR)


@dataclass(frozen=True)
class TagConfig:
    markers: Tuple[Marker, ...] = (HASH, AT)
    # Characters allowed in a tag body besides letters and digits.
    # Example: {'_', '$'} makes "#snake_case$tag" a single tag.
    additional_chars: FrozenSet[str] = frozenset()

    def __post_init__(self):
        object.__setattr__(self, "markers", tuple(self.markers))
        object.__setattr__(self, "additional_chars", frozenset(self.additional_chars))

        triggers = [m.trigger for m in self.markers]
        if len(set(triggers)) != len(triggers):
            raise ValueError(f"Duplicate marker trigger in {triggers}")
        names = [m.name for m in self.markers]
        if len(set(names)) != len(names):
            raise ValueError(f"Duplicate marker name in {names}")

    @staticmethod
    def from_options(hash_color: int = HASH_TAG_COLOR, at_color: int = AT_TAG_COLOR,
                     additional_tag_chars: Optional[Iterable[str]] = None) -> 'TagConfig':
        """Build the default '#'/'@' configuration with custom colors"""
        return TagConfig(
            markers=(
                Marker(name=HASH.name, trigger=HASH.trigger, color=hash_color),
                Marker(name=AT.name, trigger=AT.trigger, color=at_color),
            ),
            additional_chars=frozenset(additional_tag_chars or ()),
        )

    def marker_for(self, char: str) -> Optional[Marker]:
        for marker in self.markers:
            if marker.trigger == char:
                return marker
        return None

    def marker_named(self, name: str) -> Optional[Marker]:
        for marker in self.markers:
            if marker.name == name:
                return marker
        return None

    def is_tag_char(self, char: str) -> bool:
        """Letters, decimal digits and the configured extras may continue a tag"""
        return char.isalpha() or char.isdecimal() or char in self.additional_chars

    def to_dict(self):
        return {
            "markers": [
                {"name": m.name, "trigger": m.trigger, "color": m.color}
                for m in self.markers
            ],
            "additional_tag_chars": sorted(self.additional_chars),
        }

    @staticmethod
    def from_dict(data):
        """
        Build a config from its dict form.

        Accepts either a "markers" list as written by to_dict, or the flat
        construction options "hash_color" / "at_color" for the default markers.
        """
        additional = data.get("additional_tag_chars", ())
        if "markers" in data:
            return TagConfig(
                markers=tuple(Marker(name=m["name"], trigger=m["trigger"], color=m["color"])
                              for m in data["markers"]),
                additional_chars=frozenset(additional),
            )
        return TagConfig.from_options(
            hash_color=data.get("hash_color", HASH_TAG_COLOR),
            at_color=data.get("at_color", AT_TAG_COLOR),
            additional_tag_chars=additional,
        )


@dataclass(frozen=True)
class TagRange:
    """One tag occurrence: the half-open interval [start, end) of a text"""
    start: int
    end: int
    marker: Marker

    @property
    def body_start(self) -> int:
        return self.start + 1

    def contains(self, offset: int) -> bool:
        return self.start <= offset < self.end

    def text(self, source: str, include_marker: bool = True) -> str:
        """
        Slice this tag out of the text it was scanned from

        Args:
            source: The text the range was produced from
            include_marker: Keep the trigger character ("#topic") or strip it ("topic")
        """
        return source[self.start if include_marker else self.body_start:self.end]


@dataclass
class AnnotatedText:
    """A text snapshot and the tags found in it. Replaced wholesale on every change."""
    text: str = ""
    ranges: List[TagRange] = field(default_factory=list)

    def range_at(self, offset: int) -> Optional[TagRange]:
        for tag_range in self.ranges:
            if tag_range.contains(offset):
                return tag_range
            if tag_range.start > offset:
                break
        return None

    def ranges_for(self, marker: Marker) -> List[TagRange]:
        return [r for r in self.ranges if r.marker.name == marker.name]


__all__ = ['Marker', 'HASH', 'AT', 'TagConfig', 'TagRange', 'AnnotatedText',
           'HASH_TAG_COLOR', 'AT_TAG_COLOR']
