"""Type promotion in expressions and lossy casts."""

from __future__ import annotations

import numpy as np

from typetour.numeric import add, narrow


def demo_1_promotion() -> None:
    """Two int8 operands are added at 32 bits; wider operands widen the result.

    Plain numpy would keep ``int8 + int8`` at int8, so the sum goes through
    :func:`typetour.numeric.add`.
    """
    x = np.int8(10)
    y = np.int8(20)
    byte_sum = narrow(add(x, y), 8)
    promoted_sum = add(x, y)
    mixed = add(promoted_sum, np.int64(5))
    mixed_float = add(mixed, 0.5)
    print(
        f"byte_sum({byte_sum.dtype}): {byte_sum}, "
        f"promoted_sum({promoted_sum.dtype}): {promoted_sum}, "
        f"mixed({mixed.dtype}): {mixed}, "
        f"mixed_float({mixed_float.dtype}): {mixed_float}"
    )


def demo_2_casting_pitfalls() -> None:
    """Narrowing keeps the low bits; float-to-int drops the fraction."""
    big_int = np.int32(1_000_000)
    narrowed = narrow(big_int, 16)
    precise = 12345.6789
    truncated = narrow(precise, 32)
    print(
        f"narrowed int16 (from 1_000_000): {narrowed}, "
        f"truncated int32 (from 12345.6789): {truncated}"
    )


def run_all() -> None:
    demo_1_promotion()
    demo_2_casting_pitfalls()


if __name__ == "__main__":
    run_all()
