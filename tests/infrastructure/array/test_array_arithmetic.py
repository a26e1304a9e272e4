import unittest
from fractions import Fraction

import numpy as np

from ndview import Backend, NDArray, ShapeMismatchError


class _ArithmeticCases:
    backend = "python"

    def _make(self, values, shape) -> NDArray:
        if self.backend == "numpy":
            return NDArray(np.asarray(values), shape, backend="numpy")
        return NDArray(list(values), shape, backend="python")

    def test_add_and_sub(self) -> None:
        a = self._make([1, 2, 3, 4, 5, 6], (6,))
        b = self._make([6, 5, 4, 3, 2, 1], (6,))
        self.assertEqual((a + b).to_list(), [7] * 6)
        self.assertEqual((a - b).to_list(), [-5, -3, -1, 1, 3, 5])

    def test_shape_mismatch(self) -> None:
        a = self._make(range(6), (2, 3))
        b = self._make(range(6), (3, 2))
        with self.assertRaises(ShapeMismatchError):
            a + b
        with self.assertRaises(ShapeMismatchError):
            a - self._make(range(6), (6,))

    def test_operands_paired_in_logical_order(self) -> None:
        a = self._make(range(6), (2, 3))
        out = a + a.flip(1)
        self.assertEqual(out.to_list(), [2, 2, 2, 8, 8, 8])
        self.assertTrue(out.is_contiguous())

        t = self._make(range(6), (3, 2)).transpose()
        self.assertEqual((a + t).to_list(), [0, 3, 6, 4, 7, 10])

    def test_add_non_array_is_type_error(self) -> None:
        a = self._make(range(3), (3,))
        with self.assertRaises(TypeError):
            a + 1

    def test_scalar_mul_and_div(self) -> None:
        a = self._make([1, 2, 3, 4], (2, 2))
        self.assertEqual((a * 2).to_list(), [2, 4, 6, 8])
        self.assertEqual((3 * a).to_list(), [3, 6, 9, 12])
        self.assertEqual((a / 2).to_list(), [0.5, 1.0, 1.5, 2.0])

    def test_scalar_ops_keep_layout(self) -> None:
        a = self._make(range(6), (2, 3))
        v = a.flip(1).transpose()
        out = v * 10
        self.assertEqual(out.shape, v.shape)
        self.assertEqual(out.strides, v.strides)
        self.assertEqual(out.maps, v.maps)
        self.assertEqual(out.to_list(), [x * 10 for x in v.to_list()])
        self.assertFalse(out.shares_buffer_with(v))
        self.assertEqual(a.to_list(), [0, 1, 2, 3, 4, 5])

    def test_scalar_ops_on_axis_view(self) -> None:
        a = self._make(range(6), (2, 3))
        row = a.index_axis(0, 1)
        self.assertEqual((row / 1).to_list(), [3.0, 4.0, 5.0])

    def test_sequences_are_not_scalars(self) -> None:
        a = self._make([1, 2, 3], (3,))
        with self.assertRaises(TypeError):
            a * [0, 1]
        with self.assertRaises(TypeError):
            a.flip(0) * [10, 20, 30]
        with self.assertRaises(TypeError):
            (1, 2, 3) * a
        with self.assertRaises(TypeError):
            a / (2,)
        self.assertEqual(a.to_list(), [1, 2, 3])

    def test_numpy_scalars_are_scalars(self) -> None:
        a = self._make([1, 2, 3], (3,))
        self.assertEqual((a * np.int64(2)).to_list(), [2, 4, 6])

    def test_array_times_array_not_supported(self) -> None:
        a = self._make(range(3), (3,))
        with self.assertRaises(TypeError):
            a * a

    def test_negation(self) -> None:
        a = self._make([1, -2, 3], (3,))
        b = -a
        self.assertEqual(b.to_list(), [-1, 2, -3])
        self.assertEqual(a.to_list(), [1, -2, 3])

        v = a.flip(0)
        self.assertIs(v.negate(), v)
        self.assertEqual(v.to_list(), [-3, 2, -1])
        self.assertEqual(a.to_list(), [1, -2, 3])


class TestArithmeticNumpy(_ArithmeticCases, unittest.TestCase):
    backend = "numpy"

    def test_mixed_backends_produce_python_result(self) -> None:
        a = NDArray(np.arange(3), (3,))
        b = NDArray([0.5, 0.5, 0.5], (3,))
        out = a + b
        self.assertEqual(out.backend, Backend("python"))
        self.assertEqual(out.to_list(), [0.5, 1.5, 2.5])

    def test_object_scalar_moves_result_to_python_backend(self) -> None:
        a = NDArray(np.arange(3), (3,)).flip(0)
        out = a * Fraction(1, 2)
        self.assertEqual(out.backend, Backend("python"))
        self.assertIsNone(out.dtype)
        self.assertEqual(out.to_list(), [Fraction(1), Fraction(1, 2), Fraction(0)])

    def test_numpy_operands_stay_numpy(self) -> None:
        a = NDArray(np.arange(4, dtype=np.float32), (2, 2))
        out = a + a.transpose()
        self.assertEqual(out.backend, Backend("numpy"))
        np.testing.assert_allclose(out.to_numpy(), [[0, 3], [3, 6]])


class TestArithmeticPython(_ArithmeticCases, unittest.TestCase):
    backend = "python"

    def test_exact_fraction_arithmetic(self) -> None:
        a = NDArray([Fraction(1, 3), Fraction(2, 3)], (2,))
        self.assertEqual((a / 3).to_list(), [Fraction(1, 9), Fraction(2, 9)])
        self.assertEqual((a + a).to_list(), [Fraction(2, 3), Fraction(4, 3)])

    def test_division_by_zero_raises(self) -> None:
        a = NDArray([1, 2], (2,))
        with self.assertRaises(ZeroDivisionError):
            a / 0


if __name__ == "__main__":
    unittest.main()
