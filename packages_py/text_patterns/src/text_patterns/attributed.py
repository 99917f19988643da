"""
Attributed text: plain text plus styled spans.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple


@dataclass(frozen=True)
class Font:
    size: float = 12.0
    weight: str = "regular"  # regular | bold | italic


@dataclass(frozen=True)
class ParagraphStyle:
    first_line_head_indent: float = 0.0
    head_indent: float = 0.0
    paragraph_spacing: float = 0.0


@dataclass(frozen=True)
class Color:
    red: float
    green: float
    blue: float
    alpha: float = 1.0


# Attribute names, one per supported style type
FONT = "font"
PARAGRAPH_STYLE = "paragraph_style"
FOREGROUND_COLOR = "foreground_color"


def attribute_name(value: Any) -> Optional[str]:
    """Attribute key for a style value, or None if the type is unsupported."""
    if isinstance(value, Font):
        return FONT
    if isinstance(value, ParagraphStyle):
        return PARAGRAPH_STYLE
    if isinstance(value, Color):
        return FOREGROUND_COLOR
    return None


def to_attribute_map(styles: Sequence[Any]) -> Dict[str, Any]:
    """Map a list of style values to attribute names; unknown values are skipped."""
    result: Dict[str, Any] = {}
    for style in styles:
        name = attribute_name(style)
        if name is not None:
            result[name] = style
    return result


@dataclass(frozen=True)
class TextAttribute:
    """Styles to apply to the first capture group of every match of ``pattern``."""
    pattern: str
    attributes: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class AttributeSpan:
    start: int
    end: int
    attributes: Dict[str, Any]

    def slice(self, text: str) -> str:
        return text[self.start:self.end]


@dataclass
class AttributedText:
    text: str
    spans: List[AttributeSpan] = field(default_factory=list)
    base_font: Optional[Font] = None

    def attributes_at(self, index: int) -> Dict[str, Any]:
        """Merged attributes covering ``index``; later spans win."""
        merged: Dict[str, Any] = {}
        if self.base_font is not None:
            merged[FONT] = self.base_font
        for span in self.spans:
            if span.start <= index < span.end:
                merged.update(span.attributes)
        return merged

    def runs(self) -> List[Tuple[str, Dict[str, Any]]]:
        """Split the text into maximal runs sharing the same attributes."""
        result: List[Tuple[str, Dict[str, Any]]] = []
        for index, char in enumerate(self.text):
            attrs = self.attributes_at(index)
            if result and result[-1][1] == attrs:
                result[-1] = (result[-1][0] + char, attrs)
            else:
                result.append((char, attrs))
        return result
