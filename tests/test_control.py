"""Unit tests for codepoint classification."""

import unicodedata

import pytest

import ezcaper as ez
from ezcaper._tables import BUCKETS
from ezcaper.errors import CodepointError

N = ez.ControlKind.NORMAL
F = ez.ControlKind.FORMAT
C = ez.ControlKind.CONTROL


# Table structure
# ---------------------------------------------------------------------------


def test_one_bucket_per_power_of_two():
    """There is a bucket for [0, 0x7F] and one per bit up to 21 bits."""
    assert len(BUCKETS) == 15


@pytest.mark.parametrize("index", range(15))
def test_bucket_ranges_sorted_disjoint_and_in_bounds(index):
    """Ranges inside a bucket are ordered, non-overlapping and stay in the bucket."""
    low_bound = 0 if index == 0 else 1 << (index + 6)
    high_bound = (1 << (index + 7)) - 1
    prev_high = low_bound - 1
    for low, high, kind in BUCKETS[index]:
        assert low_bound <= low <= high <= high_bound
        assert low > prev_high
        assert kind in (F, C)
        prev_high = high


# Known codepoints
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "cp, kind",
    [
        (0x00, C),
        (0x09, C),
        (0x1F, C),
        (0x20, N),
        (0x41, N),
        (0x7E, N),
        (0x7F, C),
        (0x80, C),
        (0x9F, C),
        (0xA0, N),
        (0xAD, F),
        (0x0378, C),
        (0x0600, F),
        (0x070E, C),
        (0x070F, F),
        (0x180E, F),
        (0x200B, F),
        (0x200D, F),
        (0x2065, C),
        (0x2066, F),
        (0x4E00, N),
        (0xD7FC, C),
        (0xD800, C),
        (0xDFFF, C),
        (0xE000, C),
        (0xF8FF, C),
        (0xF900, N),
        (0xFE0F, N),
        (0xFEFF, F),
        (0xFFFB, F),
        (0xFFFD, N),
        (0xFFFE, C),
        (0x13430, F),
        (0x1F33E, N),
        (0x1F3FB, N),
        (0x1F468, N),
        (0x1F600, N),
        (0xE0001, F),
        (0xE0002, C),
        (0xE0041, F),
        (0xE0080, C),
        (0xE0100, N),
        (0xE01EF, N),
        (0xE01F0, C),
        (0x10FFFF, C),
    ],
)
def test_classify_known_codepoints(cp, kind):
    """Classification matches the documented category boundaries."""
    assert ez.classify(cp) is kind


def test_is_control_covers_format_and_control():
    """is_control is true for everything that is not normal."""
    assert ez.is_control(0x0A)
    assert ez.is_control(0x200D)
    assert not ez.is_control(ord("a"))


# Out of range
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("cp", [0x110000, 0x1FFFFF, 0x200000, 1 << 40])
def test_beyond_unicode_is_control(cp):
    """Values above U+10FFFF are never printed literally."""
    assert ez.classify(cp) is C


def test_negative_codepoint_raises():
    """Negative values are rejected."""
    with pytest.raises(CodepointError):
        ez.classify(-1)


# Totality
# ---------------------------------------------------------------------------


def test_classification_is_total_and_stable():
    """Every scalar value gets exactly one kind, the same kind every time."""
    kinds = set(ez.ControlKind)
    for cp in range(0x110000):
        kind = ez.classify(cp)
        assert kind in kinds
    assert ez.classify(0x200D) is ez.classify(0x200D)


def test_general_category_controls_surrogates_and_private_use():
    """Cc, Cs and Co codepoints are all classified as control."""
    for cp in range(0x110000):
        if unicodedata.category(chr(cp)) in ("Cc", "Cs", "Co"):
            assert ez.classify(cp) is C, hex(cp)
