"""NumericStringFormatRule: a string must parse as a given numeric primitive.

Twelve primitive kinds are recognized: signed and unsigned 8/16/32/64-bit
integers, native-width integers, and IEEE-754 single and double floats.
Parsing follows the invariant numeric format:

- Integers: optional surrounding whitespace, an optional ``+``/``-`` sign,
  ASCII digits only, and a value inside the kind's range.
- Floats: optional surrounding whitespace and sign, digits with optional
  ``,`` group separators before the decimal point, an optional fraction and
  exponent, or one of the symbols ``NaN``/``Infinity``/``-Infinity``.
  A finite literal that overflows the target width is rejected.
"""

from __future__ import annotations

import math
import re
import struct
import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import StrEnum
from functools import partial
from typing import TYPE_CHECKING, Any

from fieldrules.domain.errors import InputKindError
from fieldrules.domain.messages import DEFAULT_PROVIDER, MessageKey, MessageProvider
from fieldrules.domain.outcome import VALID, Outcome
from fieldrules.domain.rules.base import Rule

if TYPE_CHECKING:
    from fieldrules.domain.context import ValidationContext


class NumericKind(StrEnum):
    """Numeric primitive kinds a string can be checked against."""

    INT8 = "int8"
    UINT8 = "uint8"
    INT16 = "int16"
    UINT16 = "uint16"
    INT32 = "int32"
    UINT32 = "uint32"
    INT64 = "int64"
    UINT64 = "uint64"
    NINT = "nint"
    NUINT = "nuint"
    FLOAT32 = "float32"
    FLOAT64 = "float64"


INTEGER_RANGES: dict[NumericKind, tuple[int, int]] = {
    NumericKind.INT8: (-(2**7), 2**7 - 1),
    NumericKind.UINT8: (0, 2**8 - 1),
    NumericKind.INT16: (-(2**15), 2**15 - 1),
    NumericKind.UINT16: (0, 2**16 - 1),
    NumericKind.INT32: (-(2**31), 2**31 - 1),
    NumericKind.UINT32: (0, 2**32 - 1),
    NumericKind.INT64: (-(2**63), 2**63 - 1),
    NumericKind.UINT64: (0, 2**64 - 1),
    # Native width follows the running interpreter's pointer size.
    NumericKind.NINT: (-sys.maxsize - 1, sys.maxsize),
    NumericKind.NUINT: (0, 2 * sys.maxsize + 1),
}

_INTEGER_PATTERN = re.compile(r"^\s*[+-]?\d+\s*$", re.ASCII)
_FLOAT_PATTERN = re.compile(
    r"^\s*[+-]?(?:\d[\d,]*(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\s*$",
    re.ASCII,
)
_FLOAT_SYMBOLS = frozenset({"nan", "infinity", "+infinity", "-infinity"})
_KIND_NAMES = frozenset(kind.value for kind in NumericKind)


def parses_as_integer(text: str, kind: NumericKind) -> bool:
    """Check whether *text* is an integer literal inside *kind*'s range."""
    if not _INTEGER_PATTERN.match(text):
        return False
    low, high = INTEGER_RANGES[kind]
    stripped = text.strip()
    negative = stripped.startswith("-")
    digits = stripped.lstrip("+-").lstrip("0")
    # Digit count alone rules out values too long to convert.
    if len(digits) > len(str(max(-low, high))):
        return False
    value = int(digits or "0")
    return low <= (-value if negative else value) <= high


def _parse_float(text: str) -> float | None:
    stripped = text.strip()
    if stripped.lower() in _FLOAT_SYMBOLS:
        return float(stripped.lower())
    if not _FLOAT_PATTERN.match(text):
        return None
    value = float(stripped.replace(",", ""))
    if math.isinf(value):
        return None
    return value


def parses_as_float64(text: str) -> bool:
    """Check whether *text* is a double-precision float literal."""
    return _parse_float(text) is not None


def parses_as_float32(text: str) -> bool:
    """Check whether *text* is a single-precision float literal.

    The double value is rounded to the nearest single; rounding past the
    largest finite single is an overflow.
    """
    value = _parse_float(text)
    if value is None:
        return False
    try:
        struct.pack("<f", value)
    except OverflowError:
        return False
    return True


PARSERS: dict[NumericKind, Callable[[str], bool]] = {
    **{kind: partial(parses_as_integer, kind=kind) for kind in INTEGER_RANGES},
    NumericKind.FLOAT32: parses_as_float32,
    NumericKind.FLOAT64: parses_as_float64,
}


@dataclass(frozen=True)
class NumericStringFormatRule(Rule):
    """The value must be a string that parses as ``target_type``.

    ``target_type`` is a :class:`NumericKind` or its name. An unrecognized
    name is accepted here but makes every evaluation fail.
    """

    target_type: NumericKind | str
    error_message: str | None = None
    messages: MessageProvider = field(
        default=DEFAULT_PROVIDER, kw_only=True, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if self.target_type is None:
            msg = "target_type must not be None"
            raise ValueError(msg)
        if isinstance(self.target_type, str) and self.target_type in _KIND_NAMES:
            object.__setattr__(self, "target_type", NumericKind(self.target_type))

    @property
    def name(self) -> str:
        return "numeric_string"

    @property
    def kind(self) -> NumericKind | None:
        """The recognized numeric kind, or None for an unrecognized target."""
        if isinstance(self.target_type, NumericKind):
            return self.target_type
        return None

    def evaluate(self, value: Any, context: ValidationContext | None = None) -> Outcome:
        if not isinstance(value, str):
            self._violation(InputKindError, MessageKey.TARGET_PROPERTY_IS_NOT_STRING)

        kind = self.kind
        if kind is not None and PARSERS[kind](value):
            return VALID
        return self._failure(MessageKey.INVALID_TYPE)
