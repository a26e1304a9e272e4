import unittest
from fractions import Fraction

import numpy as np

from ndview import AxisOutOfBoundsError, EmptyArrayError, NDArray


class _ReductionCases:
    backend = "python"

    def _make(self, values, shape) -> NDArray:
        if self.backend == "numpy":
            return NDArray(np.asarray(values), shape, backend="numpy")
        return NDArray(list(values), shape, backend="python")

    def test_extremes(self) -> None:
        a = self._make([0, 1, 2, 3], (2, 2))
        self.assertEqual(a.max(), 3)
        self.assertEqual(a.min(), 0)
        self.assertEqual(a.ptp(), 3)

    def test_extremes_across(self) -> None:
        a = self._make([0, 1, 2, 3], (2, 2))
        self.assertEqual(a.max_across(0), [1, 3])
        self.assertEqual(a.max_across(1), [2, 3])
        self.assertEqual(a.min_across(0), [0, 2])
        self.assertEqual(a.min_across(1), [0, 1])

    def test_arg_extremes_report_all_ties(self) -> None:
        a = self._make([0, 1, 2, 3], (2, 2))
        self.assertEqual(a.arg_max(), [3])
        self.assertEqual(a.arg_min(), [0])

        b = self._make([5, 1, 5, 1], (2, 2))
        self.assertEqual(b.arg_max(), [0, 2])
        self.assertEqual(b.arg_min(), [1, 3])

    def test_arg_extremes_across_report_first_tie(self) -> None:
        a = self._make([5, 1, 5, 2, 2, 0], (2, 3))
        self.assertEqual(a.arg_max_across(0), [0, 0])
        self.assertEqual(a.arg_min_across(0), [1, 2])
        self.assertEqual(a.arg_max_across(1), [0, 1, 0])

    def test_reductions_follow_view_order(self) -> None:
        a = self._make(range(6), (2, 3)).flip(1)
        self.assertEqual(a.arg_max(), [3])
        self.assertEqual(a.max_across(0), [2, 5])
        self.assertEqual(a.transpose().sum_across(0), [7, 5, 3])

    def test_reductions_on_flipped_slice(self) -> None:
        a = self._make(range(1, 17), (4, 4)).flip(0).slice([(1, 3), (1, 3)])
        self.assertEqual(a.to_list(), [10, 11, 6, 7])
        self.assertEqual(a.ptp(), 5)
        self.assertEqual(a.max_across(0), [11, 7])
        self.assertEqual(a.arg_min_across(0), [0, 0])
        self.assertEqual(a.arg_max(), [1])

    def test_sum_and_prod(self) -> None:
        a = self._make([1, 2, 3, 4], (2, 2))
        self.assertEqual(a.sum(), 10)
        self.assertEqual(a.prod(), 24)
        self.assertEqual(a.sum_across(0), [3, 7])
        self.assertEqual(a.sum_across(1), [4, 6])
        self.assertEqual(a.prod_across(1), [3, 8])

    def test_mean_and_var(self) -> None:
        a = self._make([1.0, 2.0, 3.0, 4.0], (2, 2))
        self.assertAlmostEqual(a.mean(), 2.5)
        self.assertAlmostEqual(a.var(), 1.25)
        self.assertEqual(a.mean_across(1), [2.0, 3.0])

    def test_empty_array(self) -> None:
        a = self._make([], (0, 2))
        self.assertIsNone(a.max())
        self.assertIsNone(a.min())
        self.assertIsNone(a.ptp())
        self.assertEqual(a.arg_max(), [])
        self.assertEqual(a.sum(), 0)
        self.assertEqual(a.prod(), 1)
        self.assertEqual(a.max_across(0), [])
        self.assertEqual(a.max_across(1), [None, None])
        with self.assertRaises(EmptyArrayError):
            a.mean()
        with self.assertRaises(EmptyArrayError):
            a.var()

    def test_bad_axis(self) -> None:
        a = self._make([0, 1, 2, 3], (2, 2))
        with self.assertRaises(AxisOutOfBoundsError):
            a.max_across(2)
        self.assertEqual(a.max_across(-1), [2, 3])
        self.assertEqual(a.max_across(-1), a.max_across(1))


class TestReductionsNumpy(_ReductionCases, unittest.TestCase):
    backend = "numpy"

    def test_sum_seed_uses_array_dtype(self) -> None:
        a = NDArray(np.array([], dtype=np.int32), (0,))
        self.assertEqual(a.sum(), 0)
        self.assertEqual(np.asarray(a.sum()).dtype, np.int32)

    def test_float32_mean(self) -> None:
        a = NDArray(np.arange(1, 5, dtype=np.float32), (2, 2))
        np.testing.assert_allclose(a.mean(), 2.5)
        np.testing.assert_allclose(a.var(), 1.25)


class TestReductionsPython(_ReductionCases, unittest.TestCase):
    backend = "python"

    def test_exact_rational_statistics(self) -> None:
        a = NDArray([Fraction(1, 2), Fraction(1, 3), Fraction(1, 6)], (3,))
        self.assertEqual(a.sum(), Fraction(1))
        self.assertEqual(a.mean(), Fraction(1, 3))
        self.assertEqual(a.var(), Fraction(1, 54))
        self.assertEqual(a.max(), Fraction(1, 2))


if __name__ == "__main__":
    unittest.main()
