"""
Stepping UTF-8 decoder.

Decodes one scalar value at a time from a byte buffer, reporting where the
next decode should start. Ill-formed input is rejected at the end of its
maximal subpart (Unicode Standard, section 3.9), which is also how Python's
own ``"replace"`` error handler splits invalid sequences.
"""

from typing import Final

from .errors import Utf8DecodeError
from .types import ByteBuffer, Codepoint

# lead byte -> (sequence length, low and high bound of the second byte)
_LEADS: Final[dict[int, tuple[int, int, int]]] = {
    **{b: (2, 0x80, 0xBF) for b in range(0xC2, 0xE0)},
    **{b: (3, 0x80, 0xBF) for b in range(0xE0, 0xF0)},
    **{b: (4, 0x80, 0xBF) for b in range(0xF0, 0xF5)},
    # no overlongs, no surrogates, nothing past U+10FFFF
    0xE0: (3, 0xA0, 0xBF),
    0xED: (3, 0x80, 0x9F),
    0xF0: (4, 0x90, 0xBF),
    0xF4: (4, 0x80, 0x8F),
}


def decode_rune_cursor(buf: ByteBuffer, cursor: int) -> tuple[Codepoint, int]:
    """
    Decode the scalar value starting at ``cursor``.

    :param buf: Putative UTF-8 bytes.
    :param cursor: Offset of the first byte to decode, ``< len(buf)``.
    :returns: The scalar value and the offset just past it.
    :raises Utf8DecodeError: If the bytes at ``cursor`` are not well-formed.
        ``end`` on the error is past the maximal subpart, at least ``cursor + 1``.
    """
    lead = buf[cursor]
    if lead < 0x80:
        return lead, cursor + 1

    shape = _LEADS.get(lead)
    if shape is None:
        # stray continuation byte, C0/C1 or F5..FF
        raise Utf8DecodeError(start=cursor, end=cursor + 1)

    length, low, high = shape
    cp = lead & (0x7F >> length)
    pos = cursor + 1
    end = cursor + length
    while pos < end:
        if pos >= len(buf):
            # truncated at end of buffer
            raise Utf8DecodeError(start=cursor, end=pos)
        byte = buf[pos]
        if not low <= byte <= high:
            raise Utf8DecodeError(start=cursor, end=pos)
        cp = (cp << 6) | (byte & 0x3F)
        # only the second byte has a narrowed range
        low, high = 0x80, 0xBF
        pos += 1
    return cp, end
