"""
String helpers built on RegExp.
"""
import re
from typing import List, Optional, Tuple

from .regexp import RegExp, Replacement


def matches(text: str, pattern: str) -> bool:
    """True if ``pattern`` occurs anywhere in ``text``."""
    return RegExp(pattern).test(text)


def match(text: str, pattern: str, options: str = "") -> Optional[List[str]]:
    return RegExp(pattern, options).match(text)


def scan(text: str, pattern: str, options: str = "") -> Optional[List[List[str]]]:
    return RegExp(pattern, options).scan(text)


def gsub(text: str, pattern: str, replacement: Replacement, options: str = "") -> str:
    return RegExp(pattern, options).gsub(text, replacement)


def gsubi(text: str, pattern: str, replacement: Replacement, options: str = "") -> str:
    return RegExp(pattern, f"{options}i").gsub(text, replacement)


def sub(text: str, pattern: str, replacement: Replacement, options: str = "") -> str:
    return RegExp(pattern, options).sub(text, replacement)


def subi(text: str, pattern: str, replacement: Replacement, options: str = "") -> str:
    return RegExp(pattern, f"{options}i").sub(text, replacement)


def slice_out(text: str, pattern: str) -> Tuple[Optional[List[List[str]]], str]:
    """Return the matches of ``pattern`` and ``text`` with them removed."""
    regex = RegExp(pattern)
    return regex.scan(text), regex.gsub(text, "")


def split(text: str, delimiter: str) -> List[str]:
    """
    Split on a literal delimiter, dropping empty pieces.

    Returns ``[text]`` when nothing non-empty remains.
    """
    parts = [part for part in text.split(delimiter) if part] if delimiter else [text]
    return parts or [text]


def _char_class(characters: str) -> str:
    return r"\s" + "".join(re.escape(c) for c in characters)


def trim(text: str, characters: str = "") -> str:
    """Strip whitespace and ``characters`` from both ends."""
    chars = _char_class(characters)
    return gsub(text, rf"\A[{chars}]+|[{chars}]+\Z", "")


def ltrim(text: str, characters: str = "") -> str:
    return gsub(text, rf"\A[{_char_class(characters)}]+", "")


def rtrim(text: str, characters: str = "") -> str:
    return gsub(text, rf"[{_char_class(characters)}]+\Z", "")
