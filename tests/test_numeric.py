from __future__ import annotations

import math
import sys
import unittest
from pathlib import Path

import numpy as np

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from typetour import numeric
from typetour.exceptions import LossyConversionError, UnsupportedWidthError


class RangeTests(unittest.TestCase):
    def test_int_range_for_every_width(self) -> None:
        self.assertEqual(numeric.int_range(8), (-128, 127))
        self.assertEqual(numeric.int_range(16), (-32768, 32767))
        self.assertEqual(numeric.int_range(32), (-(2**31), 2**31 - 1))
        self.assertEqual(numeric.int_range(64), (-(2**63), 2**63 - 1))

    def test_unsupported_width_raises(self) -> None:
        with self.assertRaises(UnsupportedWidthError) as ctx:
            numeric.int_range(24)
        self.assertEqual(ctx.exception.bits, 24)
        with self.assertRaises(UnsupportedWidthError):
            numeric.float_type(16)

    def test_unsupported_width_is_a_value_error(self) -> None:
        with self.assertRaises(ValueError):
            numeric.wrap(1, 12)


class WraparoundTests(unittest.TestCase):
    def test_int32_max_plus_one_is_int32_min(self) -> None:
        low, high = numeric.int_range(32)
        result = numeric.add(np.int32(high), 1)
        self.assertIsInstance(result, np.int32)
        self.assertEqual(int(result), low)

    def test_int64_overflow_wraps(self) -> None:
        low, high = numeric.int_range(64)
        self.assertEqual(int(numeric.add(np.int64(high), np.int64(1))), low)
        self.assertEqual(int(numeric.subtract(np.int64(low), 1)), high)

    def test_multiply_wraps(self) -> None:
        self.assertEqual(int(numeric.multiply(np.int32(65536), np.int32(65536))), 0)

    def test_narrowing_wraps_instead_of_clamping(self) -> None:
        _, int_max = numeric.int_range(32)
        _, long_max = numeric.int_range(64)
        self.assertEqual(int(numeric.narrow(np.int32(int_max), 8)), -1)
        self.assertEqual(int(numeric.narrow(np.int64(long_max), 8)), -1)
        self.assertEqual(int(numeric.narrow(300, 8)), 44)
        self.assertEqual(int(numeric.narrow(1_000_000, 16)), 16960)

    def test_wrap_returns_requested_type(self) -> None:
        self.assertIsInstance(numeric.wrap(200, 8), np.int8)
        self.assertEqual(int(numeric.wrap(200, 8)), -56)


class ConversionTests(unittest.TestCase):
    def test_widen_preserves_value(self) -> None:
        widened = numeric.widen(np.int8(127), 32)
        self.assertIsInstance(widened, np.int32)
        self.assertEqual(int(widened), 127)

    def test_widen_refuses_to_drop_bits(self) -> None:
        with self.assertRaises(LossyConversionError) as ctx:
            numeric.widen(np.int64(5), 16)
        self.assertEqual(ctx.exception.source_bits, 64)
        self.assertEqual(ctx.exception.target_bits, 16)

    def test_python_int_literal_width(self) -> None:
        self.assertEqual(numeric.bit_width(2_147_483_647), 32)
        self.assertEqual(numeric.bit_width(12_345_678_901), 64)
        self.assertEqual(numeric.bit_width(0.5), 64)
        with self.assertRaises(TypeError):
            numeric.bit_width(True)

    def test_truncate_discards_fraction(self) -> None:
        self.assertEqual(int(numeric.narrow(12345.6789, 32)), 12345)
        self.assertEqual(int(numeric.truncate(-2.9)), -2)

    def test_truncate_special_values(self) -> None:
        low, high = numeric.int_range(32)
        self.assertEqual(int(numeric.truncate(float("nan"))), 0)
        self.assertEqual(int(numeric.truncate(float("inf"))), high)
        self.assertEqual(int(numeric.truncate(float("-inf"))), low)
        self.assertEqual(int(numeric.truncate(float("nan"), 16)), 0)

    def test_narrow_float_targets_wrap_the_saturated_int(self) -> None:
        # (short) 40000.5 and (short) 1e20: saturate into int32 first, then keep 16 bits.
        self.assertEqual(int(numeric.truncate(40000.5, 16)), -25536)
        self.assertEqual(int(numeric.truncate(1e20, 16)), -1)
        self.assertEqual(int(numeric.truncate(-1e20, 16)), 0)
        self.assertEqual(int(numeric.narrow(200.7, 8)), -56)
        self.assertIsInstance(numeric.truncate(40000.5, 16), np.int16)

    def test_truncate_to_64_bits_saturates_at_long(self) -> None:
        low, high = numeric.int_range(64)
        self.assertEqual(int(numeric.truncate(1e30, 64)), high)
        self.assertEqual(int(numeric.truncate(-1e30, 64)), low)

    def test_wrap_rejects_floats(self) -> None:
        with self.assertRaises(TypeError):
            numeric.wrap(1.9, 32)
        with self.assertRaises(TypeError):
            numeric.wrap(float("nan"), 8)
        with self.assertRaises(TypeError):
            numeric.wrap(np.float32(2.5), 16)

    def test_python_int_beyond_64_bits_is_rejected(self) -> None:
        with self.assertRaises(LossyConversionError) as ctx:
            numeric.widen(2**70, 64)
        self.assertEqual(ctx.exception.target_bits, 64)
        with self.assertRaises(LossyConversionError):
            numeric.bit_width(-(2**63) - 1)
        with self.assertRaises(LossyConversionError):
            numeric.add(2**64, 1)

    def test_double_to_float_loses_precision(self) -> None:
        narrowed = numeric.to_float32(3.141592653589793)
        self.assertIsInstance(narrowed, np.float32)
        self.assertEqual(str(narrowed), "3.1415927")
        self.assertNotEqual(float(narrowed), 3.141592653589793)

    def test_float32_overflow_is_infinite(self) -> None:
        self.assertTrue(math.isinf(numeric.to_float32(1e308)))


class PromotionTests(unittest.TestCase):
    def test_small_integers_compute_at_32_bits(self) -> None:
        self.assertIs(numeric.promote(np.int8(1), np.int8(2)), np.int32)
        self.assertIs(numeric.promote(np.int16(1), 2), np.int32)

    def test_wider_operand_wins(self) -> None:
        self.assertIs(numeric.promote(np.int32(1), np.int64(2)), np.int64)
        self.assertIs(numeric.promote(np.int64(1), 0.5), np.float64)
        self.assertIs(numeric.promote(np.int64(1), np.float32(0.5)), np.float32)
        self.assertIs(numeric.promote(np.float32(1), np.float64(0.5)), np.float64)

    def test_promoted_sum_chain(self) -> None:
        promoted = numeric.add(np.int8(10), np.int8(20))
        mixed = numeric.add(promoted, np.int64(5))
        mixed_float = numeric.add(mixed, 0.5)
        self.assertIsInstance(promoted, np.int32)
        self.assertIsInstance(mixed, np.int64)
        self.assertIsInstance(mixed_float, np.float64)
        self.assertEqual(int(numeric.narrow(promoted, 8)), 30)
        self.assertEqual(int(mixed), 35)
        self.assertEqual(float(mixed_float), 35.5)


class DivisionTests(unittest.TestCase):
    def test_integer_division_truncates_toward_zero(self) -> None:
        self.assertEqual(int(numeric.divide(-7, 2)), -3)
        self.assertEqual(int(numeric.divide(7, -2)), -3)
        self.assertEqual(int(numeric.divide(7, 2)), 3)

    def test_min_divided_by_minus_one_wraps(self) -> None:
        low, _ = numeric.int_range(32)
        self.assertEqual(int(numeric.divide(np.int32(low), -1)), low)

    def test_integer_division_by_zero_raises(self) -> None:
        with self.assertRaises(ZeroDivisionError):
            numeric.divide(1, 0)

    def test_float_division_special_values(self) -> None:
        nan = numeric.divide(0.0, 0.0)
        self.assertTrue(math.isnan(nan))
        self.assertFalse(nan == nan)
        self.assertEqual(float(numeric.divide(1.0, 0.0)), math.inf)
        self.assertEqual(float(numeric.divide(-1.0, 0)), -math.inf)

    def test_float_overflow_is_positive_infinity(self) -> None:
        beyond = numeric.multiply(np.float64(1e308), 10)
        self.assertTrue(math.isinf(beyond))
        self.assertGreater(beyond, 0)


class ComparisonTests(unittest.TestCase):
    def test_point_one_times_three(self) -> None:
        a = numeric.multiply(0.1, 3)
        self.assertFalse(a == 0.3)
        self.assertTrue(numeric.nearly_equal(a, 0.3))
        self.assertTrue(abs(a - 0.3) < 1e-9)

    def test_nearly_equal_rejects_nan(self) -> None:
        self.assertFalse(numeric.nearly_equal(float("nan"), float("nan")))

    def test_accumulation_is_close_but_not_exact(self) -> None:
        total = numeric.accumulate(0.1, 10)
        self.assertNotEqual(total, 1.0)
        self.assertLess(abs(total - 1.0), 1e-10)
        self.assertEqual(str(total), "0.9999999999999999")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
