"""UTF-16 surrogate pair detection."""

from __future__ import annotations

MIN_HIGH_SURROGATE = "\ud800"
MAX_HIGH_SURROGATE = "\udbff"
MIN_LOW_SURROGATE = "\udc00"
MAX_LOW_SURROGATE = "\udfff"
MIN_SUPPLEMENTARY_CODE_POINT = 0x10000


def is_high_surrogate(char: str) -> bool:
    return MIN_HIGH_SURROGATE <= char <= MAX_HIGH_SURROGATE


def is_low_surrogate(char: str) -> bool:
    return MIN_LOW_SURROGATE <= char <= MAX_LOW_SURROGATE


def is_surrogate_pair(high: str, low: str) -> bool:
    """Return True when ``high`` and ``low`` form a pair in that order."""
    return is_high_surrogate(high) and is_low_surrogate(low)


def is_supplementary(char: str) -> bool:
    """Return True for a character that UTF-16 stores as a surrogate pair."""
    return ord(char) >= MIN_SUPPLEMENTARY_CODE_POINT


def contains_surrogate_pair(text: str | None) -> bool:
    """Check whether ``text`` holds at least one surrogate pair.

    A pair is either a high surrogate directly followed by a low surrogate,
    or a supplementary character that Python stores natively but UTF-16
    would split into two units. The scan stops at the first pair found.
    """
    if text is None:
        return False
    previous: str | None = None
    for char in text:
        if is_supplementary(char):
            return True
        if previous is not None and is_surrogate_pair(previous, char):
            return True
        previous = char
    return False
