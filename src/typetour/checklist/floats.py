"""Floating point probes: precision, special values, and comparison."""

from __future__ import annotations

import numpy as np

from typetour.numeric import divide, multiply, nearly_equal, to_float32


def demo_1_precision_special_values() -> None:
    """float32 keeps ~7 digits, float64 ~15; overflow and 0/0 are values.

    numpy's ``str`` gives the shortest repr for each width, which is why
    float32 values are printed with ``!s``.
    """
    float_pi = to_float32(3.1415927)
    double_pi = np.float64(3.141592653589793)
    big = np.float64(1e308)
    beyond = multiply(big, 10)
    nan = divide(0.0, 0.0)
    precise_to_float = to_float32(double_pi)

    print(f"float pi      : {float_pi!s}")
    print(f"double pi     : {double_pi!s}")
    print(f"double big    : {big!s}")
    print(f"double beyond : {beyond!s}")
    print(f"double nan    : {nan!s}")
    print(f"double->float : {precise_to_float!s}")


def demo_2_epsilon_comparison() -> None:
    """0.1 has no exact binary form, so compare computed decimals with a tolerance."""
    a = multiply(0.1, 3)
    b = 0.3
    equal_direct = bool(a == b)
    equal_epsilon = nearly_equal(a, b)
    print(f"0.1 * 3 == 0.3 ? {equal_direct} (direct) vs {equal_epsilon} (epsilon)")


def run_all() -> None:
    demo_1_precision_special_values()
    demo_2_epsilon_comparison()


if __name__ == "__main__":
    run_all()
