"""
Codepoint classification.

Sorts every codepoint into ``NORMAL``, ``FORMAT`` or ``CONTROL``. Format
characters (zero width joiner, bidi controls, tag characters, ...) are
escaped when shown on their own but kept verbatim inside strings, so that a
sequence like the Farmer Bob emoji still prints as a single grapheme.
"""

from bisect import bisect_right
from typing import Final

from ._tables import BUCKETS, UNICODE_VERSION
from .errors import CodepointError
from .types import MAX_CODEPOINT, Codepoint, ControlKind

# per bucket range starts, for bisect
_LOWS: Final[tuple[tuple[int, ...], ...]] = tuple(
    tuple(low for low, _, _ in bucket) for bucket in BUCKETS
)


def _bucket_index(cp: Codepoint) -> int:
    """Index of the power-of-two bucket holding ``cp``."""
    # [0, 0x7F] -> 0, [0x80, 0xFF] -> 1, [0x100, 0x1FF] -> 2, ...
    return max(0, cp.bit_length() - 7)


def classify(cp: Codepoint) -> ControlKind:
    """
    Answer whether ``cp`` is a control, format, or normal codepoint.

    Values above U+10FFFF are not scalar values and always classify as
    ``CONTROL``.

    :raises CodepointError: If ``cp`` is negative.
    """
    if cp < 0:
        raise CodepointError("codepoint must not be negative", codepoint=cp)
    if cp > MAX_CODEPOINT:
        return ControlKind.CONTROL

    index = _bucket_index(cp)
    bucket = BUCKETS[index]
    # last range starting at or before cp
    i = bisect_right(_LOWS[index], cp) - 1
    if i >= 0:
        low, high, kind = bucket[i]
        if low <= cp <= high:
            return kind
    return ControlKind.NORMAL


def is_control(cp: Codepoint) -> bool:
    """Return ``True`` for control and format codepoints."""
    return classify(cp) is not ControlKind.NORMAL


__all__ = [
    "UNICODE_VERSION",
    "classify",
    "is_control",
]
