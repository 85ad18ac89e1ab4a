"""Code point aware string helpers for text with surrogate pairs."""

from .codepoints import code_point_length, iter_code_points, offset_by_code_points, substring
from .surrogates import (
    contains_surrogate_pair,
    is_high_surrogate,
    is_low_surrogate,
    is_supplementary,
    is_surrogate_pair,
)

__all__ = [
    "code_point_length",
    "contains_surrogate_pair",
    "is_high_surrogate",
    "is_low_surrogate",
    "is_supplementary",
    "is_surrogate_pair",
    "iter_code_points",
    "offset_by_code_points",
    "substring",
]
