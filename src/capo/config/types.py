"""Typed value parsing for CAPO settings.

Every setting is stored as a string. This module converts a retrieved
string into a number of a fixed-width numeric domain, or into a bool.

Parsing is strict: no surrounding whitespace, no digit separators, and
integers must fit the declared width. Any failure yields None, the same
result as a missing key.

Numeric domains:
- Signed integers: I8, I16, I32, I64, I128, ISIZE
- Unsigned integers: U8, U16, U32, U64, U128, USIZE
- Floating point: F32, F64

ISIZE and USIZE are the platform word width, taken as 64 bits.
"""

from __future__ import annotations

import dataclasses as _dataclasses
import fractions as _fractions
import math as _math
import re as _re
import struct as _struct
import typing as _typing

# Optional sign followed by ASCII digits only
_INTEGER_PATTERN = _re.compile(r"[+-]?[0-9]+", _re.ASCII)

# Decimal or exponent form, or one of the special values
_FLOAT_PATTERN = _re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?)",
    _re.ASCII | _re.IGNORECASE,
)

_PLATFORM_WORD_BITS = 64

# Single-precision layout: sign bit, and the largest finite value
_F32_SIGN_BIT = 0x80000000
_F32_MAX_ORDER = 0x7F7FFFFF
_F32_MAX = 3.4028234663852886e38

# Halfway between the largest finite value and the next power of two;
# anything at or above it rounds to infinity
_F32_OVERFLOW = _fractions.Fraction(2**128 - 2**103)

_TRUE_WORDS = frozenset({"yes", "true"})
_FALSE_WORDS = frozenset({"no", "false"})


@_dataclasses.dataclass(frozen=True)
class NumericType:
    """
    A fixed-width numeric domain that setting values can be parsed into.

    Attributes:
        name: Short name, e.g. "u64" or "f32".
        kind: "int" or "float".
        bits: Width in bits.
        signed: Whether negative values are allowed (integers only).
    """

    name: str
    kind: _typing.Literal["int", "float"]
    bits: int
    signed: bool = True

    @property
    def min_value(self) -> int | None:
        """Smallest representable integer, or None for floating point."""
        if self.kind != "int":
            return None
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int | None:
        """Largest representable integer, or None for floating point."""
        if self.kind != "int":
            return None
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def parse(self, text: str) -> int | float | None:
        """
        Parse text into this domain.

        Args:
            text: Raw setting value.

        Returns:
            The parsed number, or None if the text is not a valid literal
            or (for integers) does not fit the width.
        """
        if self.kind == "int":
            return self._parse_int(text)
        return self._parse_float(text)

    def _parse_int(self, text: str) -> int | None:
        if not _INTEGER_PATTERN.fullmatch(text):
            return None
        if not self.signed and text.startswith("-"):
            return None
        value = int(text)
        low, high = self.min_value, self.max_value
        if low is None or high is None or not low <= value <= high:
            return None
        return value

    def _parse_float(self, text: str) -> float | None:
        if not _FLOAT_PATTERN.fullmatch(text):
            return None
        if self.bits == 32:
            return _to_single_precision(text)
        return float(text)


def _f32_order(value: float) -> int:
    """Position of a single-precision value on the number line, as an int."""
    bits: int = _struct.unpack("<I", _struct.pack("<f", value))[0]
    return bits if bits < _F32_SIGN_BIT else -(bits & ~_F32_SIGN_BIT)


def _f32_from_order(order: int) -> float:
    bits = order if order >= 0 else _F32_SIGN_BIT | -order
    return _typing.cast(float, _struct.unpack("<f", _struct.pack("<I", bits))[0])


def _to_single_precision(text: str) -> float:
    """
    Round a float literal to the nearest single-precision value.

    Narrowing through a double can round twice and land on the wrong side
    of a halfway point, so the narrowed value and its two neighbours are
    compared against the exact decimal value. Ties go to the even mantissa.
    """
    value = float(text)
    if _math.isnan(value) or text.lstrip("+-").isalpha():
        return value

    exact = _fractions.Fraction(text)
    if abs(exact) >= _F32_OVERFLOW:
        return -_math.inf if exact < 0 else _math.inf
    if not exact:
        return value

    try:
        narrowed: float = _struct.unpack("<f", _struct.pack("<f", value))[0]
    except OverflowError:
        narrowed = _math.copysign(_F32_MAX, value)

    order = _f32_order(narrowed)
    candidates = [narrowed] + [
        _f32_from_order(neighbour)
        for neighbour in (order - 1, order + 1)
        if abs(neighbour) <= _F32_MAX_ORDER
    ]
    return min(
        candidates,
        key=lambda c: (abs(_fractions.Fraction(c) - exact), _f32_order(c) & 1),
    )


I8 = NumericType("i8", "int", 8)
I16 = NumericType("i16", "int", 16)
I32 = NumericType("i32", "int", 32)
I64 = NumericType("i64", "int", 64)
I128 = NumericType("i128", "int", 128)
ISIZE = NumericType("isize", "int", _PLATFORM_WORD_BITS)
U8 = NumericType("u8", "int", 8, signed=False)
U16 = NumericType("u16", "int", 16, signed=False)
U32 = NumericType("u32", "int", 32, signed=False)
U64 = NumericType("u64", "int", 64, signed=False)
U128 = NumericType("u128", "int", 128, signed=False)
USIZE = NumericType("usize", "int", _PLATFORM_WORD_BITS, signed=False)
F32 = NumericType("f32", "float", 32)
F64 = NumericType("f64", "float", 64)

NUMERIC_TYPES: dict[str, NumericType] = {
    t.name: t
    for t in (I8, I16, I32, I64, I128, ISIZE, U8, U16, U32, U64, U128, USIZE, F32, F64)
}
"""All numeric domains by short name."""


def get_numeric_type(name: str) -> NumericType:
    """
    Look up a numeric domain by its short name.

    Raises:
        KeyError: If the name is not a known domain.
    """
    try:
        return NUMERIC_TYPES[name.lower()]
    except KeyError:
        known = ", ".join(NUMERIC_TYPES)
        raise KeyError(f"Unknown numeric type '{name}' (known: {known})") from None


def parse_bool(text: str) -> bool | None:
    """
    Parse a yes/no or true/false word, case-insensitively.

    Returns:
        True or False, or None for any other text.
    """
    word = text.lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    return None
