# peeklingo/services/copy_mode.py
"""
Copy-mode prefix handling and copy text helpers.

A query may start with a marker that selects how results are copied:
- ">>text": copy as UPPERCASE
- ">text":  copy as lowerCamelCase (handy for naming variables)
- "text":   copy as-is
"""

import re
from dataclasses import dataclass

from peeklingo.models.types import CopyMode, TranslationQuery

COPY_MODE_MARKER = ">"

# Full-width semicolon used to join web translation values
WEB_VALUE_SEPARATOR = "；"

_RE_WORD_SPLIT = re.compile(r"[^0-9A-Za-z\u00C0-\uFFFF]+")


def detect_copy_mode(text: str = "") -> CopyMode:
    """Detect the copy mode from the leading marker characters."""
    is_first_marker = text[:1] == COPY_MODE_MARKER
    is_second_marker = text[1:2] == COPY_MODE_MARKER

    if is_first_marker and is_second_marker:
        return CopyMode.UPPERCASE
    if is_first_marker:
        return CopyMode.LOWERCASE_CAMEL_CASE
    return CopyMode.NORMAL


def strip_copy_mode_prefix(text: str, mode: CopyMode) -> str:
    """Remove the marker characters for `mode` and trim the remainder."""
    if mode == CopyMode.UPPERCASE:
        return text[2:].strip()
    if mode == CopyMode.LOWERCASE_CAMEL_CASE:
        return text[1:].strip()
    return text.strip()


def parse_query(raw_text: str) -> TranslationQuery:
    """Build a TranslationQuery from raw search text."""
    text = raw_text.strip()
    mode = detect_copy_mode(text)
    return TranslationQuery(raw_text=raw_text, text=strip_copy_mode_prefix(text, mode), copy_mode=mode)


def to_lower_camel_case(text: str) -> str:
    """Join words as lowerCamelCase: "Hello big World" -> "helloBigWorld"."""
    words = [w for w in _RE_WORD_SPLIT.split(text) if w]
    if not words:
        return text
    head, *tail = words
    return head.lower() + "".join(w[:1].upper() + w[1:].lower() for w in tail)


def apply_copy_mode(text: str, mode: CopyMode) -> str:
    """Transform result text for the clipboard according to `mode`."""
    if mode == CopyMode.UPPERCASE:
        return text.upper()
    if mode == CopyMode.LOWERCASE_CAMEL_CASE:
        return to_lower_camel_case(text)
    return text


def truncate(text: str, length: int = 16, separator: str = "..") -> str:
    if len(text) <= length:
        return text
    return text[:length] + separator


def split_web_values(text: str) -> list[str]:
    """Split a joined web translation subtitle back into its values."""
    return [v for v in text.split(WEB_VALUE_SEPARATOR) if v]


@dataclass(frozen=True)
class CopyOption:
    """An entry in the copy menu: short label + full value"""
    title: str
    value: str


def build_copy_options(values: list[str], limit: int = 10) -> list[CopyOption]:
    """
    Build copy menu entries for a list of values.

    At most `limit` entries are returned (limit <= 0 disables the cap).
    When capped, the first limit-1 values are kept and the final entry is
    the last value. With more than one entry, the last one is labelled "All".
    """
    if not values:
        return []

    last_index = len(values) - 1
    final_values = list(values)
    if limit > 0 and last_index >= limit:
        final_values = values[: limit - 1]
        final_values.append(values[last_index])

    final_last = len(final_values) - 1
    return [
        CopyOption(
            title="All" if idx == final_last and idx > 0 else truncate(text),
            value=text,
        )
        for idx, text in enumerate(final_values)
    ]
