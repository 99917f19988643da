"""
HTML to attributed text conversion.
"""
import logging
import re
from typing import Any, Dict, List, Mapping, Optional, Sequence

from .attributed import AttributedText, Font, ParagraphStyle, TextAttribute, to_attribute_map
from .regexp import attribute

logger = logging.getLogger(__name__)

PATTERNS = {
    # &#169; or &#xA9;
    "NUMERIC_ENTITY": re.compile(r"&#(?:[xX]([0-9a-fA-F]+)|([0-9]+));"),
    "LINE_BREAK": re.compile(r"<br\s*/?>", re.IGNORECASE),
}

PARAGRAPH_STYLE = ParagraphStyle(first_line_head_indent=17, head_indent=20, paragraph_spacing=12)
LIST_ITEM_STYLE = ParagraphStyle(first_line_head_indent=20, head_indent=30, paragraph_spacing=7)

DEFAULT_TAG_STYLES: Dict[str, List[Any]] = {
    "p": [PARAGRAPH_STYLE],
    "ul": [PARAGRAPH_STYLE],
    "ol": [PARAGRAPH_STYLE],
    "div": [PARAGRAPH_STYLE],
    "section": [PARAGRAPH_STYLE],
    "main": [PARAGRAPH_STYLE],
    "li": [LIST_ITEM_STYLE],
    "b": [Font(12, "bold")],
    "bold": [Font(12, "bold")],
    "strong": [Font(12, "bold")],
    "i": [Font(12, "italic")],
    "em": [Font(12, "italic")],
    "a": [Font(12)],
    "h1": [Font(24, "bold")],
    "h2": [Font(20, "bold")],
    "h3": [Font(18, "italic")],
    "h4": [Font(16, "bold")],
    "h5": [Font(15)],
}


def _decode_entity(match: "re.Match[str]") -> str:
    hex_digits, digits = match.groups()
    try:
        return chr(int(hex_digits, 16) if hex_digits else int(digits))
    except (ValueError, OverflowError):
        logger.warning(f"There was an issue while trying to decode character '{match.group(0)}'")
        return ""


def decode_html_special_characters(text: str) -> str:
    """Convert numeric character references, e.g. ``&#169;`` to ``©``."""
    return PATTERNS["NUMERIC_ENTITY"].sub(_decode_entity, text)


def tag_pattern(tag: str) -> str:
    """Pattern matching an element and capturing its content."""
    name = re.escape(tag)
    return rf"<{name}(?:\s[^>]*)?>(.+?)</{name}>"


def build_attributes(styles: Mapping[str, Sequence[Any]]) -> List[TextAttribute]:
    """Turn a pattern -> style list mapping into TextAttributes."""
    return [
        TextAttribute(pattern=pattern, attributes=to_attribute_map(values))
        for pattern, values in styles.items()
    ]


def attribute_html(
    text: str,
    overrides: Optional[Mapping[str, Sequence[Any]]] = None,
    font: Optional[Font] = None,
) -> AttributedText:
    """
    Strip HTML tags and style their content.

    Line breaks become newlines and numeric entities are decoded first.
    ``overrides`` replaces the default styles for the given tag names, e.g.
    ``{"p": [ParagraphStyle(paragraph_spacing=16), Font(16)]}``.
    """
    source = PATTERNS["LINE_BREAK"].sub("\n", decode_html_special_characters(text))

    styles: Dict[str, Sequence[Any]] = dict(DEFAULT_TAG_STYLES)
    styles.update(overrides or {})

    patterns = {tag_pattern(tag): values for tag, values in styles.items()}
    return attribute(source, build_attributes(patterns), font=font)
