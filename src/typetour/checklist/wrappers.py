"""Boxed integers: boxing, unboxing, absence, and the identity cache."""

from __future__ import annotations

from typing import Optional

from typetour.boxing import IntegerBox, unbox


def demo_1_boxing() -> None:
    """A box is a reference and may be absent; the primitive inside may not."""
    boxed = IntegerBox.value_of(42)
    unboxed = unbox(boxed)
    nullable: Optional[IntegerBox] = None
    print(f"boxed: {boxed}, unboxed: {unboxed}, nullable is None? {nullable is None}")


def demo_2_identity_cache() -> None:
    """Identity of equal boxes depends on the cache window, not on the value."""
    a1 = IntegerBox.value_of(128)
    a2 = IntegerBox.value_of(128)
    c1 = IntegerBox.value_of(100)
    c2 = IntegerBox.value_of(100)
    window = f"{IntegerBox.CACHE_LOW}..{IntegerBox.CACHE_HIGH}"
    print(f"128 objects with is ? {a1 is a2} (outside cache)")
    print(f"100 objects with is ? {c1 is c2} (inside IntegerBox cache {window})")


def run_all() -> None:
    demo_1_boxing()
    demo_2_identity_cache()


if __name__ == "__main__":
    run_all()
