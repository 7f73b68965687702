"""
Escaping of single codepoints and byte strings.

Everything here writes straight to a caller supplied text sink. The two
string escapers share one scan and differ only in the policy applied to
bytes that are not well-formed UTF-8:

- exact: every invalid byte becomes ``\\xHH``; reading the quoted output back
  as a literal reproduces the input byte for byte.
- lossy: every ill-formed subsequence becomes a single U+FFFD.

Both use ``\\t``, ``\\r`` and ``\\n``, print other ASCII controls as ``\\xHH``
and all other escaped values as ``\\u{hex}``.

.. code-block:: python

    print(f"a string: {esc_string_exact(data)} and a char {esc_char(c):u}")
"""

import io
import logging
from dataclasses import dataclass
from typing import ClassVar

from ._utf8 import decode_rune_cursor
from .control import classify, is_control
from .errors import CodepointTooLarge, Utf8DecodeError
from .mode import Mode, ModeName
from .policy import EXACT, LOSSY, InvalidBytePolicy
from .types import MAX_CODEPOINT, ByteBuffer, Codepoint, ControlKind, TextSink

log = logging.getLogger(__name__)

_SIMPLE_ESCAPES = {
    0x09: "\\t",
    0x0A: "\\n",
    0x0D: "\\r",
}


def _as_codepoint(c: Codepoint | str) -> Codepoint:
    """Accept either an int or a one character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {len(c)}")
        return ord(c)
    return c


def _write_control(cp: Codepoint, sink: TextSink) -> None:
    """Write the escape sequence for a control or format codepoint."""
    if cp < 0x80:
        simple = _SIMPLE_ESCAPES.get(cp)
        sink.write(simple if simple is not None else f"\\x{cp:02x}")
    elif cp <= MAX_CODEPOINT:
        sink.write(f"\\u{{{cp:x}}}")
    else:
        raise CodepointTooLarge(cp)


# Char escaper
# ===================================================================================


def write_char(
    c: Codepoint | str, sink: TextSink, mode: Mode | ModeName = Mode.QUOTED
) -> None:
    """
    Escape one codepoint to ``sink``.

    Control and format codepoints are always escaped. In quoted mode the
    result is wrapped in single quotes and ``'`` is written as ``\\'``.
    Surrogates are accepted and come out as ``\\u{d800}`` and friends.

    :param c: Codepoint, or a one character string.
    :param sink: Text sink to write to.
    :param mode: "quoted" (default) or "bare".
    :raises CodepointTooLarge: If the codepoint is above U+10FFFF.
    :raises CodepointError: If the codepoint is negative.
    :raises InvalidModeSpecifier: If mode is unknown.
    """
    mode = Mode.get(mode)
    cp = _as_codepoint(c)
    quoted = mode is Mode.QUOTED

    if quoted:
        sink.write("'")
    if is_control(cp):
        _write_control(cp, sink)
    elif quoted and cp == 0x27:
        sink.write("\\'")
    else:
        sink.write(chr(cp))
    if quoted:
        sink.write("'")


# ===================================================================================


# String escapers
# ===================================================================================


def write_string(
    data: ByteBuffer,
    sink: TextSink,
    policy: InvalidBytePolicy,
    mode: Mode | ModeName = Mode.QUOTED,
) -> None:
    """
    Escape a putative UTF-8 byte string to ``sink``.

    Literal runs are written verbatim, control codepoints are escaped, and
    invalid bytes are handed to ``policy``. In quoted mode the output is
    wrapped in double quotes and ``"`` and ``\\`` are backslash escaped.
    Format codepoints stay inside the run.

    :param data: Bytes to escape; never modified.
    :param sink: Text sink to write to.
    :param policy: What to write for ill-formed bytes.
    :param mode: "quoted" (default) or "bare".
    :raises InvalidModeSpecifier: If mode is unknown.
    """
    mode = Mode.get(mode)
    quoted = mode is Mode.QUOTED
    buf = memoryview(data).cast("B")
    size = len(buf)

    if quoted:
        sink.write('"')

    # [0, start) is written, [start, cursor) is the pending run
    start = 0
    cursor = 0
    while cursor < size:
        this_cursor = cursor
        try:
            cp, cursor = decode_rune_cursor(buf, cursor)
        except Utf8DecodeError as e:
            if start < this_cursor:
                sink.write(str(buf[start:this_cursor], "utf-8"))
            cursor = max(e.end, this_cursor + 1)
            log.debug(
                f"invalid UTF-8 at bytes {this_cursor}..{cursor}, using {policy.NAME}"
            )
            policy.write_invalid(buf, this_cursor, cursor, sink)
            start = cursor
            continue

        if classify(cp) is ControlKind.CONTROL:
            if start < this_cursor:
                sink.write(str(buf[start:this_cursor], "utf-8"))
            start = cursor
            _write_control(cp, sink)
        elif quoted and (cp == 0x22 or cp == 0x5C):
            # normal and format alike
            if start < this_cursor:
                sink.write(str(buf[start:this_cursor], "utf-8"))
            start = cursor
            sink.write("\\" + chr(cp))

    if start < size:
        sink.write(str(buf[start:size], "utf-8"))
    if quoted:
        sink.write('"')


def write_exact(
    data: ByteBuffer, sink: TextSink, mode: Mode | ModeName = Mode.QUOTED
) -> None:
    """Escape ``data`` to ``sink``, printing invalid bytes as ``\\xHH``."""
    write_string(data, sink, EXACT, mode)


def write_lossy(
    data: ByteBuffer, sink: TextSink, mode: Mode | ModeName = Mode.QUOTED
) -> None:
    """Escape ``data`` to ``sink``, replacing invalid sequences with U+FFFD."""
    write_string(data, sink, LOSSY, mode)


# ===================================================================================


# String returning helpers
# ===================================================================================


def escape_char(c: Codepoint | str, mode: Mode | ModeName = Mode.QUOTED) -> str:
    """Return the escaped form of one codepoint."""
    out = io.StringIO()
    write_char(c, out, mode)
    return out.getvalue()


def escape_exact(data: ByteBuffer, mode: Mode | ModeName = Mode.QUOTED) -> str:
    """Return ``data`` escaped with invalid bytes kept as ``\\xHH``."""
    out = io.StringIO()
    write_exact(data, out, mode)
    return out.getvalue()


def escape_lossy(data: ByteBuffer, mode: Mode | ModeName = Mode.QUOTED) -> str:
    """Return ``data`` escaped with invalid sequences replaced by U+FFFD."""
    out = io.StringIO()
    write_lossy(data, out, mode)
    return out.getvalue()


# ===================================================================================


# Formatting wrappers
# ===================================================================================


@dataclass(frozen=True, slots=True)
class EscChar:
    """
    A codepoint that formats escaped.

    ``format(esc, "")`` writes it quoted, ``format(esc, "u")`` bare.
    """

    c: Codepoint | str

    def __format__(self, spec: str) -> str:
        mode = Mode.from_format_spec(spec, "u", type(self).__name__)
        return escape_char(self.c, mode)

    def __str__(self) -> str:
        return escape_char(self.c)

    def write_to(self, sink: TextSink, mode: Mode | ModeName = Mode.QUOTED) -> None:
        """Write the escaped codepoint to ``sink``."""
        write_char(self.c, sink, mode)


@dataclass(frozen=True, slots=True)
class _EscString:
    """Byte string that formats escaped; ``""`` quotes it, ``"s"`` is bare."""

    POLICY: ClassVar[InvalidBytePolicy]

    data: ByteBuffer

    def __format__(self, spec: str) -> str:
        mode = Mode.from_format_spec(spec, "s", type(self).__name__)
        out = io.StringIO()
        write_string(self.data, out, self.POLICY, mode)
        return out.getvalue()

    def __str__(self) -> str:
        return format(self, "")

    def write_to(self, sink: TextSink, mode: Mode | ModeName = Mode.QUOTED) -> None:
        """Write the escaped string to ``sink``."""
        write_string(self.data, sink, self.POLICY, mode)


class EscStringExact(_EscString):
    """Escaped printer for strings. Prints invalid bytes as ``\\xHH``."""

    POLICY = EXACT


class EscStringLossy(_EscString):
    """Escaped printer for strings. Replaces invalid sequences with U+FFFD."""

    POLICY = LOSSY


def esc_char(c: Codepoint | str) -> EscChar:
    """Escape a Unicode scalar value for formatted printing."""
    return EscChar(c)


def esc_string_exact(data: ByteBuffer) -> EscStringExact:
    """Escape a string, printing invalid bytes as ``\\xHH``."""
    return EscStringExact(data)


def esc_string_lossy(data: ByteBuffer) -> EscStringLossy:
    """Escape a string, replacing invalid UTF-8 with U+FFFD."""
    return EscStringLossy(data)


# ===================================================================================
