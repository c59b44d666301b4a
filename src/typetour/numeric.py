"""Fixed-width integer and IEEE-754 float semantics on numpy scalars.

Python integers are unbounded and Python raises on ``0.0 / 0.0``, so the
tour routes its arithmetic through these helpers instead. Integer results are
reduced modulo 2**bits and never raise; float results follow IEEE-754 and
yield ``inf``/``nan`` silently.

Operands may be numpy scalars or plain Python numbers. A Python ``int`` is
treated like a 32-bit literal when it fits and a 64-bit one otherwise, and
is rejected beyond 64 bits; a Python ``float`` is a 64-bit double.
"""

from __future__ import annotations

import math
import operator
from typing import Callable, Union

import numpy as np

from .exceptions import LossyConversionError, UnsupportedWidthError

Number = Union[int, float, np.integer, np.floating]

INTEGER_TYPES: dict[int, type[np.signedinteger]] = {
    8: np.int8,
    16: np.int16,
    32: np.int32,
    64: np.int64,
}
FLOAT_TYPES: dict[int, type[np.floating]] = {
    32: np.float32,
    64: np.float64,
}
# Integer arithmetic never happens below this width.
PROMOTION_FLOOR = 32
DEFAULT_EPSILON = 1e-9


def integer_type(bits: int) -> type[np.signedinteger]:
    try:
        return INTEGER_TYPES[bits]
    except KeyError:
        raise UnsupportedWidthError(
            f"No signed integer type is {bits} bits wide.", bits=bits
        ) from None


def float_type(bits: int) -> type[np.floating]:
    try:
        return FLOAT_TYPES[bits]
    except KeyError:
        raise UnsupportedWidthError(
            f"No floating point type is {bits} bits wide.", bits=bits
        ) from None


def int_range(bits: int) -> tuple[int, int]:
    """Return the ``(min, max)`` values of a signed integer of ``bits``."""
    info = np.iinfo(integer_type(bits))
    return int(info.min), int(info.max)


def _is_float(value: Number) -> bool:
    return isinstance(value, (float, np.floating))


def _fits(value: int, bits: int) -> bool:
    low, high = int_range(bits)
    return low <= value <= high


def _bits_of(scalar_type: type[np.number]) -> int:
    return np.dtype(scalar_type).itemsize * 8


def bit_width(value: Number) -> int:
    """Return the storage width, in bits, that ``value`` is computed at."""
    if isinstance(value, (bool, np.bool_)):
        raise TypeError("Logical values are not numeric.")
    if isinstance(value, (np.integer, np.floating)):
        return value.dtype.itemsize * 8
    if isinstance(value, int):
        if not _fits(value, 64):
            raise LossyConversionError(
                f"{value} does not fit in 64 bits.",
                source_bits=value.bit_length() + 1,
                target_bits=64,
            )
        return 32 if _fits(value, 32) else 64
    if isinstance(value, float):
        return 64
    raise TypeError(f"Unsupported numeric value {value!r}.")


def wrap(value: Number, bits: int) -> np.signedinteger:
    """Reduce an integer into the signed range of ``bits`` (two's complement)."""
    if isinstance(value, (float, np.floating)):
        raise TypeError("Cannot wrap a floating point value; use truncate() or narrow().")
    scalar_type = integer_type(bits)
    half = 1 << (bits - 1)
    return scalar_type((int(value) + half) % (1 << bits) - half)


def widen(value: Number, bits: int) -> np.number:
    """Convert ``value`` to a type at least as wide as its own.

    Raises :class:`LossyConversionError` when ``bits`` is narrower than the
    source; dropping bits always goes through :func:`narrow`.
    """
    source_bits = bit_width(value)
    if source_bits > bits:
        raise LossyConversionError(
            f"Cannot widen a {source_bits}-bit value into {bits} bits.",
            source_bits=source_bits,
            target_bits=bits,
        )
    if _is_float(value):
        return float_type(bits)(value)
    return integer_type(bits)(int(value))


def truncate(value: Number, bits: int = 32) -> np.signedinteger:
    """Cast a float to an integer type, discarding the fraction.

    Follows the JVM float-to-int cast: NaN becomes 0 and the value is first
    saturated into ``int`` (``long`` for 64 bits). Narrower targets then
    keep the low bits of that ``int``, so ``truncate(40000.5, 16)`` is
    -25536 and ``truncate(1e20, 16)`` is -1.
    """
    low, high = int_range(64 if bits == 64 else 32)
    value = float(value)
    if math.isnan(value):
        saturated = 0
    elif value >= high:
        saturated = high
    elif value <= low:
        saturated = low
    else:
        saturated = math.trunc(value)
    return wrap(saturated, bits)


def narrow(value: Number, bits: int) -> np.signedinteger:
    """Explicit cast to a ``bits``-wide integer: wraps integers, truncates floats."""
    if _is_float(value):
        return truncate(value, bits)
    return wrap(value, bits)


def to_float32(value: Number) -> np.float32:
    with np.errstate(over="ignore"):
        return np.float32(value)


def promote(*values: Number) -> type[np.number]:
    """Binary numeric promotion.

    double beats float beats long beats int, and integer operands are never
    computed narrower than 32 bits.
    """
    float_widths = [bit_width(value) for value in values if _is_float(value)]
    if float_widths:
        return float_type(max(float_widths))
    widest = max([PROMOTION_FLOOR, *(bit_width(value) for value in values)])
    return integer_type(widest)


def _int_divide(a: int, b: int) -> int:
    if b == 0:
        raise ZeroDivisionError("integer division by zero")
    quotient = abs(a) // abs(b)
    # Integer division rounds toward zero, not toward negative infinity.
    return -quotient if (a < 0) != (b < 0) else quotient


def _apply(
    float_op: Callable[[np.floating, np.floating], np.floating],
    int_op: Callable[[int, int], int],
    a: Number,
    b: Number,
) -> np.number:
    result_type = promote(a, b)
    if issubclass(result_type, np.integer):
        return wrap(int_op(int(a), int(b)), _bits_of(result_type))
    with np.errstate(over="ignore", divide="ignore", invalid="ignore"):
        return result_type(float_op(result_type(a), result_type(b)))


def add(a: Number, b: Number) -> np.number:
    return _apply(operator.add, operator.add, a, b)


def subtract(a: Number, b: Number) -> np.number:
    return _apply(operator.sub, operator.sub, a, b)


def multiply(a: Number, b: Number) -> np.number:
    return _apply(operator.mul, operator.mul, a, b)


def divide(a: Number, b: Number) -> np.number:
    """Divide after promotion.

    Integer division truncates toward zero and raises ``ZeroDivisionError``
    for a zero divisor. Float division never raises: ``x / 0.0`` is an
    infinity and ``0.0 / 0.0`` is NaN.
    """
    return _apply(operator.truediv, _int_divide, a, b)


def nearly_equal(a: Number, b: Number, epsilon: float = DEFAULT_EPSILON) -> bool:
    return bool(abs(float(a) - float(b)) < epsilon)


def accumulate(step: Number, times: int) -> float:
    """Add ``step`` to 0.0 ``times`` times, one addition at a time."""
    total = 0.0
    for _ in range(times):
        total += float(step)
    return total
