import unittest

import numpy as np

from ndview import NDArray


class _UnaryCases:
    backend = "python"

    def _make(self, values, shape) -> NDArray:
        if self.backend == "numpy":
            return NDArray(np.asarray(values), shape, backend="numpy")
        return NDArray(list(values), shape, backend="python")

    def test_clip_returns_new_dense_array(self) -> None:
        a = self._make([-3, 5, 1, 9], (2, 2))
        c = a.clip(0, 4)
        self.assertEqual(c.to_list(), [0, 4, 1, 4])
        self.assertEqual(a.to_list(), [-3, 5, 1, 9])
        self.assertFalse(c.shares_buffer_with(a))
        self.assertTrue(c.is_contiguous())

    def test_clip_of_view_uses_logical_order(self) -> None:
        a = self._make([-3, 5, 1, 9], (2, 2))
        self.assertEqual(a.transpose().clip(0, 4).to_list(), [0, 1, 4, 4])

    def test_clip_rejects_inverted_bounds(self) -> None:
        a = self._make([1, 2], (2,))
        with self.assertRaises(ValueError):
            a.clip(3, 1)
        with self.assertRaises(ValueError):
            a.clip_inplace(3, 1)

    def test_clip_inplace_only_touches_visible_elements(self) -> None:
        a = self._make([-5, 10, -5, 10, -5, 10], (2, 3))
        v = a.slice([(0, 2), (1, 3)])
        self.assertIs(v.clip_inplace(0, 5), v)
        self.assertEqual(v.to_list(), [5, 0, 0, 5])
        # the source keeps its values after the copy-on-write split
        self.assertEqual(a.to_list(), [-5, 10, -5, 10, -5, 10])

    def test_clip_inplace_unshared(self) -> None:
        a = self._make([-5, 10, 3], (3,))
        a.clip_inplace(0, 5)
        self.assertEqual(a.to_list(), [0, 5, 3])

    def test_negate_in_place(self) -> None:
        a = self._make([1, 2, 3, 4], (2, 2))
        a.negate()
        self.assertEqual(a.to_list(), [-1, -2, -3, -4])


class TestUnaryNumpy(_UnaryCases, unittest.TestCase):
    backend = "numpy"


class TestUnaryPython(_UnaryCases, unittest.TestCase):
    backend = "python"

    def test_clip_strings(self) -> None:
        a = NDArray(["a", "m", "z"], (3,))
        self.assertEqual(a.clip("c", "x").to_list(), ["c", "m", "x"])


if __name__ == "__main__":
    unittest.main()
