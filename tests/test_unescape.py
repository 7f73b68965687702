"""Unit tests for reading escaped literals back, and the exact round trip."""

import pytest

import ezcaper as ez
from ezcaper.errors import LiteralSyntaxError

SAMPLES = [
    b"",
    b"plain ascii",
    b'quotes " and \\ backslashes',
    b"\t\r\n\x00\x05\x7f",
    "caf\u00e9 \u65e5\u672c \U0001f389".encode(),
    "Farmer \U0001f468\U0001f3fb\u200d\U0001f33e Bob".encode(),
    "\u0085\u00ad\u2066\ufeff\U000e0041".encode(),
    b"bad \xc0 byte",
    b"Truncated \xf0\x9f\x98 \xf0\x9f\x98\x80",
    b"\xed\xa0\x80\xf4\x90\x80\x80\xff\xfe",
    b"\\x41 is not an escape here",
    b"ends with a backslash \\",
    bytes(range(256)),
]


# Exact round trip
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("data", SAMPLES)
def test_exact_round_trip(data):
    """Reading the quoted exact output back gives the original bytes."""
    assert ez.read_literal(ez.escape_exact(data)) == data


@pytest.mark.parametrize("b", range(256))
def test_exact_round_trip_single_byte(b):
    """Every single byte, valid or not, survives the round trip."""
    data = bytes([b])
    assert ez.read_literal(ez.escape_exact(data)) == data


def test_bare_round_trip_without_delimiters():
    """Bare output reads back when there is no quote or backslash to lose."""
    data = b"tab\there \xc0"
    assert ez.read_literal(ez.escape_exact(data, "bare"), "bare") == data


@pytest.mark.parametrize(
    "cp", [0x00, 0x09, 0x27, 0x41, 0x7F, 0x85, 0x200D, 0xD800, 0xFFFD, 0x10FFFF]
)
def test_char_round_trip(cp):
    """Character literals read back to the same codepoint."""
    assert ez.read_char_literal(ez.escape_char(cp)) == cp


# Literal syntax
# ---------------------------------------------------------------------------


def test_read_literal_escapes():
    """All escapes the escapers produce are understood."""
    text = '"\\t\\r\\n\\"\\\\\\\'\\x00\\xff\\u{41}\\u{1f600}"'
    assert ez.read_literal(text) == b"\t\r\n\"\\'\x00\xffA" + "\U0001f600".encode()


def test_read_literal_uppercase_hex():
    """Hex digits are case-insensitive."""
    assert ez.read_literal('"\\xFF\\u{E9}"') == b"\xff\xc3\xa9"


@pytest.mark.parametrize(
    "text, position",
    [
        ('"ab\\q"', 3),
        ('"\\x4"', 1),
        ('"\\u{}"', 1),
        ('"\\u{110000}"', 1),
        ('"\\u{d800}"', 1),
        ('"a"b"', 2),
        ('"a\ud800b"', 2),
        ('"\udcff"', 1),
    ],
)
def test_read_literal_errors(text, position):
    """Malformed literals report where they went wrong."""
    with pytest.raises(LiteralSyntaxError) as excinfo:
        ez.read_literal(text)
    assert excinfo.value.position == position
    assert excinfo.value.text == text


@pytest.mark.parametrize("text", ["", '"', "abc", '"abc', '"\\"'])
def test_read_literal_bad_delimiters(text):
    """Quoted literals must open and close with an unescaped quote."""
    with pytest.raises(LiteralSyntaxError):
        ez.read_literal(text)


def test_read_literal_dangling_backslash():
    """A trailing lone backslash is an error in bare mode."""
    with pytest.raises(LiteralSyntaxError, match="dangling"):
        ez.read_literal("abc\\", "bare")


@pytest.mark.parametrize("text", ["''", "'ab'", "'''", "'\\q'", "'\\u{110000}'"])
def test_read_char_literal_errors(text):
    """Character literals hold exactly one valid character."""
    with pytest.raises(LiteralSyntaxError):
        ez.read_char_literal(text)


def test_read_char_literal_bare():
    """Bare character literals need no quotes and keep ' as is."""
    assert ez.read_char_literal("'", "bare") == 0x27
    assert ez.read_char_literal("\\u{200d}", "bare") == 0x200D
