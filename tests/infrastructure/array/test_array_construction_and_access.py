import unittest
import warnings
from fractions import Fraction

import numpy as np

from ndview import (
    Backend,
    DimensionMismatchError,
    IndexOutOfBoundsError,
    NDArray,
    ShapeMismatchError,
)


class _ConstructionAndAccessCases:
    backend = "python"

    def _make(self, values, shape) -> NDArray:
        if self.backend == "numpy":
            return NDArray(np.asarray(values), shape, backend="numpy")
        return NDArray(list(values), shape, backend="python")

    def test_descriptors(self) -> None:
        a = self._make(range(24), (2, 3, 4))
        self.assertEqual(a.shape, (2, 3, 4))
        self.assertEqual(a.strides, (12, 4, 1))
        self.assertEqual(a.ndim, 3)
        self.assertEqual(a.size, 24)
        self.assertEqual(a.backend, Backend(self.backend))
        self.assertTrue(all(m.is_identity() for m in a.maps))
        self.assertTrue(a.is_contiguous())

    def test_count_mismatch_raises(self) -> None:
        with self.assertRaises(ShapeMismatchError):
            self._make([1, 2, 3, 4, 5], (2, 3))

    def test_negative_extent_raises(self) -> None:
        with self.assertRaises(ValueError):
            self._make([], (2, -1))

    def test_get_in_and_out_of_range(self) -> None:
        a = self._make(range(6), (2, 3))
        self.assertEqual(a.get((1, 2)), 5)
        self.assertIsNone(a.get((2, 0)))
        self.assertIsNone(a.get((0, -1)))
        self.assertEqual(a.get((0, 3), default=-1), -1)

    def test_non_integral_indices_raise(self) -> None:
        a = self._make(range(6), (2, 3))
        with self.assertRaises(TypeError):
            a.get((1.9, 0))
        with self.assertRaises(TypeError):
            a[0, 1.0]
        with self.assertRaises(TypeError):
            a.set((0.5, 0), 7)
        self.assertEqual(a.get((np.int64(1), 2)), 5)

    def test_get_with_wrong_arity(self) -> None:
        a = self._make(range(6), (2, 3))
        with self.assertRaises(DimensionMismatchError):
            a.get((1,))
        with self.assertRaises(DimensionMismatchError):
            a[0, 0, 0]

    def test_getitem(self) -> None:
        a = self._make(range(6), (2, 3))
        self.assertEqual(a[1, 0], 3)
        with self.assertRaises(IndexOutOfBoundsError):
            a[2, 0]
        b = self._make([7, 8, 9], (3,))
        self.assertEqual(b[2], 9)

    def test_getitem_with_slices_returns_view(self) -> None:
        a = self._make(range(12), (3, 4))
        v = a[1:3, :]
        self.assertEqual(v.shape, (2, 4))
        self.assertEqual(v.to_list(), list(range(4, 12)))
        self.assertTrue(v.shares_buffer_with(a))

        col = a[:, 1]
        self.assertEqual(col.shape, (3,))
        self.assertEqual(col.to_list(), [1, 5, 9])

        with self.assertRaises(ValueError):
            a[::2, :]

    def test_set_and_setitem(self) -> None:
        a = self._make(range(6), (2, 3))
        a.set((0, 1), 10)
        a[1, 2] = 20
        self.assertEqual(a.to_list(), [0, 10, 2, 3, 4, 20])
        with self.assertRaises(IndexOutOfBoundsError):
            a[2, 2] = 1

    def test_write_through_view_does_not_touch_source(self) -> None:
        a = self._make(range(6), (2, 3))
        v = a.transpose()
        v[0, 1] = 100
        self.assertEqual(v[0, 1], 100)
        self.assertEqual(a[1, 0], 3)
        self.assertFalse(v.shares_buffer_with(a))

    def test_zero_dimensional_array(self) -> None:
        a = self._make([5], ())
        self.assertEqual(a.ndim, 0)
        self.assertEqual(a.size, 1)
        self.assertEqual(a.get(()), 5)
        self.assertEqual(a.to_list(), [5])

    def test_equality_is_structural(self) -> None:
        a = self._make(range(6), (2, 3))
        self.assertEqual(a.transpose().transpose(), a)
        self.assertNotEqual(a.flip(0), a)
        self.assertNotEqual(a, self._make(range(6), (3, 2)))


class TestConstructionAndAccessNumpy(_ConstructionAndAccessCases, unittest.TestCase):
    backend = "numpy"

    def test_dtype(self) -> None:
        a = NDArray(np.arange(4, dtype=np.float32), (2, 2))
        self.assertEqual(a.dtype, np.float32)

    def test_ndarray_input_is_raveled_and_copied(self) -> None:
        src = np.arange(6).reshape(2, 3)
        a = NDArray(src, (3, 2))
        src[0, 0] = 42
        self.assertEqual(a[0, 0], 0)
        self.assertEqual(a.backend, Backend("numpy"))

    def test_object_data_falls_back_with_warning(self) -> None:
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            a = NDArray([Fraction(1, 2), Fraction(1, 3)], (2,), backend="numpy")
        self.assertTrue(any(issubclass(w.category, RuntimeWarning) for w in caught))
        self.assertEqual(a.backend, Backend("python"))
        self.assertEqual(a.to_list(), [Fraction(1, 2), Fraction(1, 3)])

    def test_dtype_keyword_selects_numpy(self) -> None:
        a = NDArray([1, 2, 3], (3,), dtype=np.int32)
        self.assertEqual(a.backend, Backend("numpy"))
        self.assertEqual(a.dtype, np.int32)


class TestConstructionAndAccessPython(_ConstructionAndAccessCases, unittest.TestCase):
    backend = "python"

    def test_sequences_default_to_python_backend(self) -> None:
        a = NDArray([1, 2, 3, 4], (2, 2))
        self.assertEqual(a.backend, Backend("python"))
        self.assertIsNone(a.dtype)

    def test_arbitrary_elements(self) -> None:
        a = NDArray(["a", "b", "c", "d"], (2, 2))
        self.assertEqual(a.transpose().to_list(), ["a", "c", "b", "d"])

    def test_dtype_rejected_for_python_backend(self) -> None:
        with self.assertRaises(ValueError):
            NDArray([1, 2], (2,), backend="python", dtype=np.int32)

    def test_generator_buffer(self) -> None:
        a = NDArray((i * i for i in range(4)), 4)
        self.assertEqual(a.to_list(), [0, 1, 4, 9])


if __name__ == "__main__":
    unittest.main()
