"""ezcaper: escape control characters and strings."""

from .control import UNICODE_VERSION, classify, is_control
from .errors import (
    CodepointError,
    CodepointTooLarge,
    EzcaperError,
    InvalidModeSpecifier,
    LiteralSyntaxError,
)
from .escape import (
    EscChar,
    EscStringExact,
    EscStringLossy,
    esc_char,
    esc_string_exact,
    esc_string_lossy,
    escape_char,
    escape_exact,
    escape_lossy,
    write_char,
    write_exact,
    write_lossy,
)
from .mode import Mode, list_modes
from .types import ControlKind
from .unescape import read_char_literal, read_literal

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("ezcaper")
except PackageNotFoundError:
    __version__ = "dev"

__all__ = [
    "UNICODE_VERSION",
    "ControlKind",
    "classify",
    "is_control",
    "Mode",
    "list_modes",
    "EscChar",
    "EscStringExact",
    "EscStringLossy",
    "esc_char",
    "esc_string_exact",
    "esc_string_lossy",
    "escape_char",
    "escape_exact",
    "escape_lossy",
    "write_char",
    "write_exact",
    "write_lossy",
    "read_literal",
    "read_char_literal",
    "EzcaperError",
    "CodepointError",
    "CodepointTooLarge",
    "InvalidModeSpecifier",
    "LiteralSyntaxError",
]
