"""Absent vs empty values, and small demos that reinforce the tour."""

from __future__ import annotations

from typing import Optional

import numpy as np

from typetour.numeric import accumulate


def demo_1_null_vs_empty() -> None:
    null_string: Optional[str] = None
    empty_string = ""
    empty_array = np.empty(0, dtype=np.int32)
    print(
        f"null_string is None? {null_string is None}, "
        f"empty_string length: {len(empty_string)}, "
        f"empty_array length: {len(empty_array)}"
    )


def demo_2_array_references() -> None:
    """Binding a second name to an array shares its storage."""
    original = np.array([1, 2, 3], dtype=np.int32)
    alias = original
    alias[0] = 99
    print(f"array references -> original[0]: {original[0]}")


def demo_3_string_immutability() -> None:
    base = "hello"
    upper = base.upper()
    print(f"string immutability -> base: {base}, upper: {upper}")


def demo_4_floating_accumulation() -> None:
    """Ten additions of 0.1 fall just short of 1.0."""
    total = accumulate(0.1, 10)
    print(f"floating accumulation -> total: {total} (expected 1.0)")


def run_all() -> None:
    demo_1_null_vs_empty()
    demo_2_array_references()
    demo_3_string_immutability()
    demo_4_floating_accumulation()


if __name__ == "__main__":
    run_all()
