"""Integer family probes: ranges, literals, overflow, widening and narrowing.

Python's own ``int`` never overflows, so every value here is a numpy
fixed-width scalar produced by :mod:`typetour.numeric`.
"""

from __future__ import annotations

import numpy as np

from typetour.numeric import add, int_range, narrow, widen

TYPE_NAMES = {8: "byte", 16: "short", 32: "int", 64: "long"}


def demo_1_ranges() -> None:
    """Signed ranges follow from two's complement: -2**(n-1) .. 2**(n-1) - 1."""
    for bits, type_name in TYPE_NAMES.items():
        low, high = int_range(bits)
        print(f"{type_name + ' range':<14}: {low} .. {high}")


def demo_2_literals() -> None:
    """Hex, binary and octal literals, with underscores for readability (PEP 515)."""
    hex_value = 0xFF
    binary = 0b1010_0110
    octal = 0o777
    card_number_chunk = widen(12_345_678_901, 64)  # does not fit in 32 bits.
    print(
        f"hex 0xFF      : {hex_value}, binary 0b1010_0110 : {binary}, "
        f"octal 0o777 : {octal}"
    )
    print(f"underscore long: {card_number_chunk}")


def demo_3_overflow() -> None:
    """One past the 32-bit maximum wraps to the minimum."""
    _, int_max = int_range(32)
    overflowed = add(np.int32(int_max), 1)
    print(f"overflow example (int_max + 1): {overflowed}")


def demo_4_widen_narrow() -> None:
    """Widening keeps the value; narrowing keeps only the low bits."""
    _, byte_max = int_range(8)
    _, int_max = int_range(32)
    widened_from_byte = widen(np.int8(byte_max), 32)
    narrowed_from_int = narrow(np.int32(int_max), 8)  # 0x7FFFFFFF -> 0xFF
    print(
        f"widened_from_byte: {widened_from_byte}, "
        f"narrowed_from_int: {narrowed_from_int}"
    )


def run_all() -> None:
    demo_1_ranges()
    demo_2_literals()
    demo_3_overflow()
    demo_4_widen_narrow()


if __name__ == "__main__":
    run_all()
