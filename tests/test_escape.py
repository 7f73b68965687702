"""Unit tests for the char and string escapers."""

import io

import pytest

import ezcaper as ez
from ezcaper.errors import CodepointError, CodepointTooLarge, InvalidModeSpecifier

FARMER_BOB = "Farmer \U0001f468\U0001f3fb\u200d\U0001f33e Bob"


class ListSink:
    """Sink that records every write separately."""

    def __init__(self) -> None:
        self.parts: list[str] = []

    def write(self, s: str) -> int:
        self.parts.append(s)
        return len(s)


class FailingSink:
    """Sink whose writes always fail."""

    def write(self, s: str) -> int:
        raise OSError("sink closed")


# Char escaper
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "c, quoted, bare",
    [
        ("!", "'!'", "!"),
        ("\t", "'\\t'", "\\t"),
        ("\r", "'\\r'", "\\r"),
        ("\n", "'\\n'", "\\n"),
        (0x05, "'\\x05'", "\\x05"),
        (0x7F, "'\\x7f'", "\\x7f"),
        (0x85, "'\\u{85}'", "\\u{85}"),
        (0xAD, "'\\u{ad}'", "\\u{ad}"),
        (0x200D, "'\\u{200d}'", "\\u{200d}"),
        (0xE0041, "'\\u{e0041}'", "\\u{e0041}"),
        (0x10FFFF, "'\\u{10ffff}'", "\\u{10ffff}"),
        ("∅", "'∅'", "∅"),
        (0x1F600, "'\U0001f600'", "\U0001f600"),
        ('"', "'\"'", '"'),
        ("\\", "'\\'", "\\"),
    ],
)
def test_escape_char(c, quoted, bare):
    """Control and format codepoints are escaped, everything else is literal."""
    assert ez.escape_char(c) == quoted
    assert ez.escape_char(c, "bare") == bare


def test_escape_char_single_quote():
    """Quoted mode escapes the single quote, bare mode leaves it alone."""
    assert ez.escape_char("'") == "'\\''"
    assert ez.escape_char("'", ez.Mode.BARE) == "'"


def test_escape_char_surrogate():
    """Surrogates are accepted and escaped."""
    assert ez.escape_char(0xD800) == "'\\u{d800}'"


def test_escape_char_too_large():
    """Values above U+10FFFF are a recoverable error."""
    with pytest.raises(CodepointTooLarge) as excinfo:
        ez.escape_char(0x110000)
    assert excinfo.value.codepoint == 0x110000
    assert isinstance(excinfo.value, ValueError)


def test_escape_char_negative():
    """Negative values are rejected."""
    with pytest.raises(CodepointError):
        ez.escape_char(-1)


def test_escape_char_rejects_strings():
    """Only single characters are accepted as strings."""
    with pytest.raises(TypeError):
        ez.escape_char("ab")


def test_esc_char_format_specs():
    """The empty spec quotes, "u" is bare."""
    assert f"{ez.esc_char('!')}" == "'!'"
    assert f"{ez.esc_char('!'):u}" == "!"
    assert str(ez.esc_char(0x200D)) == "'\\u{200d}'"


def test_esc_char_bad_format_spec():
    """Any other spec is a caller bug."""
    with pytest.raises(InvalidModeSpecifier):
        format(ez.esc_char("!"), "s")


def test_write_char_to_sink():
    """write_to writes to the sink it is given."""
    out = io.StringIO()
    ez.esc_char("\n").write_to(out, "bare")
    assert out.getvalue() == "\\n"


# Lossy string escaper
# ---------------------------------------------------------------------------


def test_lossy_farmer_bob_verbatim():
    """Format characters inside a string stay in the literal run."""
    data = FARMER_BOB.encode()
    assert f"{ez.esc_string_lossy(data):s}" == FARMER_BOB


def test_lossy_bad_byte():
    """An invalid lead byte becomes U+FFFD."""
    assert format(ez.esc_string_lossy(b"bad \xc0 byte"), "s") == "bad \ufffd byte"
    assert format(ez.esc_string_lossy(b"bad \xc0 byte")) == '"bad \ufffd byte"'


def test_lossy_controls():
    """Controls use \\t, \\xHH and \\u{...}."""
    assert format(ez.esc_string_lossy(b"\t\x05\xc2\x81")) == '"\\t\\x05\\u{81}"'


def test_lossy_one_replacement_per_subpart():
    """A truncated sequence is replaced once, not once per byte."""
    result = ez.escape_lossy(b"Truncated \xf0\x9f\x98 \xf0\x9f\x98\x80", "bare")
    assert result == "Truncated \ufffd \U0001f600"


def test_lossy_isolated_invalid_byte():
    """Exactly one U+FFFD lands where the bad byte was."""
    result = ez.escape_lossy(b"abc\xffdef", "bare")
    assert result == "abc\ufffddef"
    assert result.count("\ufffd") == 1


@pytest.mark.parametrize(
    "data",
    [
        b"\xc0\xaf",
        b"\xe0\x80\xaf",
        b"\xed\xa0\x80",
        b"\xf0\x80\x80\xaf",
        b"\xf4\x90\x80\x80",
        b"\xf8\x88\x80\x80\x80",
        b"\x80\xbf",
        b"a\xf0\x9f\x98",
        b"\xe2\x82",
        b"\xe2\x82\xac",
        b"\xfe\xff",
        b"\xf1\x80\x80\xe1\x80\xc2",
    ],
)
def test_lossy_matches_python_replace(data):
    """Substitution follows the same maximal subpart rule as Python."""
    assert ez.escape_lossy(data, "bare") == data.decode("utf-8", errors="replace")


# Exact string escaper
# ---------------------------------------------------------------------------


def test_exact_farmer_bob_verbatim():
    """Format characters inside a string stay in the literal run."""
    data = FARMER_BOB.encode()
    assert f"{ez.esc_string_exact(data):s}" == FARMER_BOB


def test_exact_bad_byte():
    """An invalid byte is printed as \\xHH."""
    assert format(ez.esc_string_exact(b"bad \xc0 byte"), "s") == "bad \\xc0 byte"


def test_exact_truncated_sequence():
    """Each orphan byte is escaped and the next codepoint stays literal."""
    data = "Truncated ".encode() + b"\xf0\x9f\x98 " + "\U0001f600".encode()
    assert f"{ez.esc_string_exact(data)}" == '"Truncated \\xf0\\x9f\\x98 \U0001f600"'


def test_exact_surrogate_bytes():
    """Encoded surrogates are not decoded; their bytes are escaped."""
    assert ez.escape_exact(b"\xed\xa0\x80", "bare") == "\\xed\\xa0\\x80"


def test_exact_non_ascii_controls():
    """Control codepoints above 0x7F use \\u{...}, format ones stay literal."""
    data = "a\u0085b\ue000c\u200dd".encode()
    assert ez.escape_exact(data) == '"a\\u{85}b\\u{e000}c\u200dd"'


# Shared string behaviour
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("escape", [ez.escape_exact, ez.escape_lossy])
def test_quote_and_backslash(escape):
    """Quoted mode escapes " and \\, bare mode does not."""
    data = b'say "hi" \\ bye'
    assert escape(data) == '"say \\"hi\\" \\\\ bye"'
    assert escape(data, "bare") == 'say "hi" \\ bye'


@pytest.mark.parametrize("escape", [ez.escape_exact, ez.escape_lossy])
def test_single_quote_untouched_in_strings(escape):
    """Only the enclosing delimiter is escaped."""
    assert escape(b"it's") == '"it\'s"'


@pytest.mark.parametrize("escape", [ez.escape_exact, ez.escape_lossy])
def test_empty(escape):
    """An empty buffer is an empty literal."""
    assert escape(b"") == '""'
    assert escape(b"", "bare") == ""


@pytest.mark.parametrize("data", [bytearray(b"a\tb"), memoryview(b"a\tb")])
def test_bytes_like_input(data):
    """bytearray and memoryview are accepted and left untouched."""
    assert ez.escape_exact(data) == '"a\\tb"'
    assert bytes(data) == b"a\tb"


def test_writes_runs_in_order():
    """Runs and escapes are appended to the sink in input order."""
    sink = ListSink()
    ez.write_exact(b"ab\ncd\xff", sink)
    assert sink.parts == ['"', "ab", "\\n", "cd", "\\xff", '"']


def test_sink_errors_propagate():
    """Errors raised by the sink reach the caller unchanged."""
    with pytest.raises(OSError):
        ez.write_lossy(b"abc", FailingSink())


def test_unknown_mode_writes_nothing():
    """An unknown mode is rejected before any output."""
    out = io.StringIO()
    with pytest.raises(InvalidModeSpecifier):
        ez.write_exact(b"abc", out, "fancy")
    assert out.getvalue() == ""


@pytest.mark.parametrize("wrapper", [ez.esc_string_exact, ez.esc_string_lossy])
def test_string_bad_format_spec(wrapper):
    """Strings accept only "" and "s"."""
    with pytest.raises(InvalidModeSpecifier):
        format(wrapper(b"abc"), "u")


def test_str_is_quoted():
    """str() of a wrapper is the quoted form."""
    assert str(ez.esc_string_exact(b"\x00")) == '"\\x00"'
    assert str(ez.esc_string_lossy(b"\x00")) == '"\\x00"'


# Format pass-through
# ---------------------------------------------------------------------------


def test_zwj_in_string_versus_alone():
    """A joiner is verbatim inside a string but escaped on its own."""
    zwj = "\u200d"
    assert zwj in ez.escape_exact(FARMER_BOB.encode())
    assert ez.escape_char(zwj) == "'\\u{200d}'"
