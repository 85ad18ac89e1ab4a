"""Code point indexing over text that may carry surrogate pairs.

Python strings index by character, and a character is usually a whole code
point. Text that came through a UTF-16 boundary can still spell a
supplementary character as two surrogate characters; those two are treated
as a single code point here so a slice never cuts between them.
"""

from __future__ import annotations

from typing import Iterator

from .surrogates import is_surrogate_pair


def _pair_at(text: str, index: int) -> bool:
    return index + 1 < len(text) and is_surrogate_pair(text[index], text[index + 1])


def _step_forward(text: str, index: int) -> int:
    return index + 2 if _pair_at(text, index) else index + 1


def _step_backward(text: str, index: int) -> int:
    return index - 2 if index >= 2 and _pair_at(text, index - 2) else index - 1


def iter_code_points(text: str) -> Iterator[str]:
    """Yield each code point of ``text`` as the slice that holds it."""
    i = 0
    while i < len(text):
        next_i = _step_forward(text, i)
        yield text[i:next_i]
        i = next_i


def code_point_length(text: str) -> int:
    count = 0
    i = 0
    while i < len(text):
        i = _step_forward(text, i)
        count += 1
    return count


def offset_by_code_points(text: str, index: int, code_point_offset: int) -> int:
    """Return the index ``code_point_offset`` code points away from ``index``.

    A negative offset walks backward. Surrogate pairs are always stepped
    over whole, so the result never lands between a high and a low surrogate
    unless ``index`` already did.
    """
    if index < 0 or index > len(text):
        raise IndexError(f"Index {index} is out of range for text of length {len(text)}")

    i = index
    if code_point_offset >= 0:
        for _ in range(code_point_offset):
            if i >= len(text):
                raise IndexError(f"Offset {code_point_offset} walks past the end of the text from index {index}")
            i = _step_forward(text, i)
    else:
        for _ in range(-code_point_offset):
            if i <= 0:
                raise IndexError(f"Offset {code_point_offset} walks past the start of the text from index {index}")
            i = _step_backward(text, i)
    return i


def substring(text: str | None, start: int, end: int) -> str | None:
    """Slice ``text`` by code point positions without raising.

    Negative positions count back from the end. ``end`` is clamped to the
    code point length, an empty string is returned when ``start`` lies past
    ``end``, and ``None`` input gives ``None``.
    """
    if text is None:
        return None

    length = code_point_length(text)
    if end < 0:
        end = length + end
    if start < 0:
        start = length + start
    if end > length:
        end = length
    if start > end:
        return ""
    if start < 0:
        start = 0
    if end < 0:
        end = 0

    unit_start = offset_by_code_points(text, 0, start)
    unit_end = offset_by_code_points(text, unit_start, end - start)
    return text[unit_start:unit_end]
