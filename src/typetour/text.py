"""UTF-16 code unit helpers.

A code unit is a 16-bit unsigned value. Most characters fit in one unit;
code points above U+FFFF need a high surrogate followed by a low surrogate,
and a lone surrogate is not a character at all.
"""

from __future__ import annotations

from .exceptions import CodeUnitError

MAX_CODE_UNIT = 0xFFFF
HIGH_SURROGATE_START = 0xD800
LOW_SURROGATE_START = 0xDC00
SURROGATE_END = 0xDFFF
SUPPLEMENTARY_START = 0x10000


def code_unit(value: int | str) -> int:
    """Return ``value`` as a validated code unit.

    Accepts an integer or a one-character string whose character lies in
    the Basic Multilingual Plane.
    """
    if isinstance(value, str):
        if len(value) != 1:
            raise CodeUnitError(
                f"Expected a single character, got {value!r}.", value=value
            )
        value = ord(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise CodeUnitError(f"{value!r} is not a code unit.", value=value)
    if not 0 <= value <= MAX_CODE_UNIT:
        raise CodeUnitError(
            f"{value:#x} is outside the 16-bit code unit range.", value=value
        )
    return value


def is_high_surrogate(unit: int) -> bool:
    return HIGH_SURROGATE_START <= unit < LOW_SURROGATE_START


def is_low_surrogate(unit: int) -> bool:
    return LOW_SURROGATE_START <= unit <= SURROGATE_END


def is_surrogate(unit: int) -> bool:
    return HIGH_SURROGATE_START <= unit <= SURROGATE_END


def to_code_point(high: int, low: int) -> int:
    """Combine a surrogate pair into the code point it encodes."""
    if not is_high_surrogate(high):
        raise CodeUnitError(f"{high:#06x} is not a high surrogate.", value=high)
    if not is_low_surrogate(low):
        raise CodeUnitError(f"{low:#06x} is not a low surrogate.", value=low)
    return (
        SUPPLEMENTARY_START
        + ((high - HIGH_SURROGATE_START) << 10)
        + (low - LOW_SURROGATE_START)
    )


def code_units(text: str) -> list[int]:
    """Return the UTF-16 code units of ``text``."""
    encoded = text.encode("utf-16-be", errors="surrogatepass")
    return [int.from_bytes(encoded[i : i + 2], "big") for i in range(0, len(encoded), 2)]


def display(unit: int) -> str:
    """Printable form of a code unit.

    Surrogates cannot be encoded on their own, so they are shown as a
    ``\\uXXXX`` escape instead of the raw character.
    """
    unit = code_unit(unit)
    if is_surrogate(unit):
        return f"\\u{unit:04x}"
    return chr(unit)
