"""
Regular expression wrapper with single-letter option flags.
"""
import logging
import re
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Pattern, Union

from .attributed import AttributeSpan, AttributedText, Font, TextAttribute

logger = logging.getLogger(__name__)

# m is always on; w and l have no Python counterpart and are accepted as no-ops
OPTION_FLAGS = {
    "i": re.IGNORECASE,
    "x": re.VERBOSE,
    "s": re.DOTALL,
    "m": re.MULTILINE,
    "w": 0,
    "l": 0,
    "c": 0,
}

DOLLAR_GROUP = re.compile(r"\$(\d+)")

Replacement = Union[str, Callable[[str], str]]


def compile_options(options: str) -> int:
    flags = re.MULTILINE
    for option in options:
        if option not in OPTION_FLAGS:
            raise ValueError(f"Unsupported regex option '{option}'")
        flags |= OPTION_FLAGS[option]
    return flags


def _expand_template(replacement: str) -> str:
    """Translate ``$1`` style group references into Python's ``\\g<1>``."""
    return DOLLAR_GROUP.sub(lambda m: f"\\g<{m.group(1)}>", replacement.replace("\\", "\\\\"))


@dataclass(frozen=True)
class RegExpMatch:
    text: str
    start: int
    end: int
    groups: List[str]


class RegExp:
    """
    A compiled pattern.

    Options are single letters:

    * i: case-insensitive
    * x: ignore whitespace and #-comments in the pattern
    * s: ``.`` matches newlines
    * m: ``^`` and ``$`` match at line boundaries (always on)
    * w: unicode word boundaries (default in Python)
    * c: treat the pattern as literal text
    * l: only ``\\n`` separates lines (default in Python)
    """

    def __init__(self, pattern: str, options: str = ""):
        self.pattern = pattern
        self.options = options
        source = re.escape(pattern) if "c" in options else pattern
        self._regex: Pattern[str] = re.compile(source, compile_options(options))

    @property
    def regex(self) -> Pattern[str]:
        return self._regex

    def test(self, text: str) -> bool:
        return self._regex.search(text) is not None

    def match(self, text: str) -> Optional[List[str]]:
        """Whole match plus capture groups of the first match."""
        found = self._regex.search(text)
        if found is None:
            return None
        return [found.group(0)] + [g or "" for g in found.groups()]

    def scan(self, text: str) -> Optional[List[List[str]]]:
        """Whole match plus capture groups of every match."""
        results = [
            [found.group(0)] + [g or "" for g in found.groups()]
            for found in self._regex.finditer(text)
        ]
        return results or None

    def _replace(self, text: str, replacement: Replacement, count: int) -> str:
        if callable(replacement):
            return self._regex.sub(lambda m: replacement(m.group(0)), text, count=count)
        return self._regex.sub(_expand_template(replacement), text, count=count)

    def gsub(self, text: str, replacement: Replacement) -> str:
        """Replace every match. ``replacement`` may use ``$1`` group references."""
        return self._replace(text, replacement, 0)

    def sub(self, text: str, replacement: Replacement) -> str:
        """Replace the first match only."""
        return self._replace(text, replacement, 1)

    def substring_ranges(self, text: str) -> Optional[List[RegExpMatch]]:
        results = [
            RegExpMatch(
                text=found.group(0),
                start=found.start(),
                end=found.end(),
                groups=[g or "" for g in found.groups()],
            )
            for found in self._regex.finditer(text)
        ]
        return results or None


def _shift(position: int, start: int, end: int, inner_start: int, inner_end: int) -> int:
    """Map a position in the old text to the text with [start, end) collapsed to its inner part."""
    if position <= start:
        return position
    removed_head = inner_start - start
    if position <= inner_start:
        return start
    if position <= inner_end:
        return position - removed_head
    if position < end:
        return start + (inner_end - inner_start)
    return position - (end - start) + (inner_end - inner_start)


def attribute(
    text: str,
    attributes: Iterable[TextAttribute],
    font: Optional[Font] = None,
    options: str = "s",
) -> AttributedText:
    """
    Apply styles to pattern matches and strip the surrounding markup.

    Each match is replaced by its first capture group (or the whole match if
    the pattern has none), and the styles cover the kept text.
    """
    current = text
    spans: List[AttributeSpan] = []

    for text_attribute in attributes:
        regex = RegExp(text_attribute.pattern, options).regex
        position = 0
        while True:
            found = regex.search(current, position)
            if found is None:
                break
            group = 1 if regex.groups else 0
            start, end = found.start(), found.end()
            inner_start, inner_end = found.start(group), found.end(group)
            inner = current[inner_start:inner_end]

            spans = [
                AttributeSpan(
                    _shift(s.start, start, end, inner_start, inner_end),
                    _shift(s.end, start, end, inner_start, inner_end),
                    s.attributes,
                )
                for s in spans
            ]
            current = current[:start] + inner + current[end:]
            spans.append(AttributeSpan(start, start + len(inner), dict(text_attribute.attributes)))
            position = start + len(inner) if end > start else start + 1

    return AttributedText(
        text=current,
        spans=[s for s in spans if s.end > s.start],
        base_font=font,
    )
