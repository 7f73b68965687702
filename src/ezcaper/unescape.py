"""
Read escaped literals back into bytes and codepoints.

This is the inverse of the exact string escaper: for any byte string ``b``,
``read_literal(escape_exact(b)) == b``. Bare output does not escape ``"`` or
``\\`` and so only reads back when the input had neither.
"""

import regex as re

from .errors import LiteralSyntaxError
from .mode import Mode, ModeName
from .types import MAX_CODEPOINT, Codepoint

_TOKEN = re.compile(
    r"""
    \\x(?P<byte>[0-9a-fA-F]{2})
    | \\u\{(?P<unicode>[0-9a-fA-F]{1,6})\}
    | \\(?P<simple>[trn"'\\])
    | (?P<bad>\\.?)
    | (?P<text>[^\\]+)
    """,
    re.VERBOSE | re.DOTALL,
)

_SIMPLE = {
    "t": 0x09,
    "r": 0x0D,
    "n": 0x0A,
    '"': 0x22,
    "'": 0x27,
    "\\": 0x5C,
}


def _unwrap(text: str, quote: str, mode: Mode) -> tuple[str, int]:
    """Strip the delimiters in quoted mode; return the body and its offset."""
    if mode is Mode.BARE:
        return text, 0
    if len(text) < 2 or text[0] != quote or text[-1] != quote:
        raise LiteralSyntaxError(f"literal must be wrapped in {quote}", text=text)
    # the closing quote must not itself be escaped
    body = text[1:-1]
    trailing = len(body) - len(body.rstrip("\\"))
    if trailing % 2:
        raise LiteralSyntaxError(
            "unterminated literal", position=len(text) - 1, text=text
        )
    return body, 1


def _unicode_value(digits: str, position: int, text: str) -> Codepoint:
    value = int(digits, 16)
    if value > MAX_CODEPOINT:
        raise LiteralSyntaxError(
            "unicode escape out of range", position=position, text=text
        )
    return value


def read_literal(text: str, mode: Mode | ModeName = Mode.QUOTED) -> bytes:
    """
    Decode an escaped string literal to bytes.

    :param text: Escaped text, wrapped in double quotes unless ``mode`` is bare.
    :param mode: "quoted" (default) or "bare".
    :returns: The bytes the literal denotes.
    :raises LiteralSyntaxError: On bad delimiters, unknown or malformed escapes,
        an unescaped ``"`` inside a quoted literal, a lone surrogate character,
        or a ``\\u{...}`` naming a surrogate or a value above U+10FFFF.
    """
    mode = Mode.get(mode)
    body, offset = _unwrap(text, '"', mode)
    out = bytearray()

    for m in _TOKEN.finditer(body):
        position = offset + m.start()
        if (chunk := m.group("text")) is not None:
            if mode is Mode.QUOTED and '"' in chunk:
                raise LiteralSyntaxError(
                    "unescaped quote",
                    position=position + chunk.index('"'),
                    text=text,
                )
            try:
                out.extend(chunk.encode("utf-8"))
            except UnicodeEncodeError as e:
                raise LiteralSyntaxError(
                    "surrogate in string literal",
                    position=position + e.start,
                    text=text,
                ) from e
        elif (digits := m.group("byte")) is not None:
            out.append(int(digits, 16))
        elif (digits := m.group("unicode")) is not None:
            value = _unicode_value(digits, position, text)
            if 0xD800 <= value <= 0xDFFF:
                raise LiteralSyntaxError(
                    "surrogate in string literal", position=position, text=text
                )
            out.extend(chr(value).encode("utf-8"))
        elif (simple := m.group("simple")) is not None:
            out.append(_SIMPLE[simple])
        else:
            bad = m.group("bad")
            message = "dangling backslash" if bad == "\\" else f"unknown escape {bad!r}"
            raise LiteralSyntaxError(message, position=position, text=text)

    return bytes(out)


def read_char_literal(text: str, mode: Mode | ModeName = Mode.QUOTED) -> Codepoint:
    """
    Decode an escaped character literal to its codepoint.

    Surrogates are accepted here, since the char escaper produces them.

    :raises LiteralSyntaxError: If the literal is malformed or does not hold
        exactly one codepoint.
    """
    mode = Mode.get(mode)
    body, offset = _unwrap(text, "'", mode)
    m = _TOKEN.fullmatch(body)
    if m is None or m.group("bad") is not None:
        raise LiteralSyntaxError("expected exactly one character", text=text)

    if (chunk := m.group("text")) is not None:
        if len(chunk) != 1:
            raise LiteralSyntaxError("expected exactly one character", text=text)
        if mode is Mode.QUOTED and chunk == "'":
            raise LiteralSyntaxError("unescaped quote", position=offset, text=text)
        return ord(chunk)
    if (digits := m.group("byte")) is not None:
        return int(digits, 16)
    if (digits := m.group("unicode")) is not None:
        return _unicode_value(digits, offset, text)
    return _SIMPLE[m.group("simple")]


__all__ = [
    "read_literal",
    "read_char_literal",
]
