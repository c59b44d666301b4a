"""Character code units and logical values."""

from __future__ import annotations

from typetour.text import code_unit, display


def demo_1_code_units() -> None:
    """A code unit can come from a literal, an escape, or a plain number.

    A lone high surrogate is half of a character; it is shown escaped.
    """
    letter_a = code_unit("A")
    unicode_heart = code_unit("\u2665")  # heart suit
    decimal_code = code_unit(65)
    surrogate_high = code_unit(0xD83D)

    print(f"char literal  : {display(letter_a)}")
    print(f"char unicode  : {display(unicode_heart)}")
    print(f"char decimal  : {display(decimal_code)}")
    print(
        f"surrogate only: {display(surrogate_high)} "
        "(needs low surrogate for full codepoint)"
    )


def demo_2_booleans() -> None:
    feature_flag = True
    is_adult = 20 >= 18
    print(f"feature_flag: {feature_flag}, is_adult: {is_adult}")


def run_all() -> None:
    demo_1_code_units()
    demo_2_booleans()


if __name__ == "__main__":
    run_all()
