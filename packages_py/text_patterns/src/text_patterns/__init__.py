"""
Text Patterns - regex-based string helpers.
"""
from .attributed import (
    AttributeSpan,
    AttributedText,
    Color,
    Font,
    ParagraphStyle,
    TextAttribute,
    to_attribute_map,
)
from .regexp import RegExp, RegExpMatch, attribute
from .strings import (
    gsub,
    gsubi,
    ltrim,
    match,
    matches,
    rtrim,
    scan,
    slice_out,
    split,
    sub,
    subi,
    trim,
)
from .dates import to_date
from .html import attribute_html, decode_html_special_characters

__version__ = "0.1.0"

__all__ = [
    "AttributeSpan",
    "AttributedText",
    "Color",
    "Font",
    "ParagraphStyle",
    "TextAttribute",
    "to_attribute_map",
    "RegExp",
    "RegExpMatch",
    "attribute",
    "gsub",
    "gsubi",
    "ltrim",
    "match",
    "matches",
    "rtrim",
    "scan",
    "slice_out",
    "split",
    "sub",
    "subi",
    "trim",
    "to_date",
    "attribute_html",
    "decode_html_special_characters",
]
