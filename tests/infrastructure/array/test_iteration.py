import unittest

from ndview import NDArray
from ndview.infrastructure.array._iteration import ArrayIterator, AxisIter, odometer


class TestOdometer(unittest.TestCase):
    def test_row_major_order(self) -> None:
        self.assertEqual(
            list(odometer((2, 3))),
            [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2)],
        )

    def test_counts(self) -> None:
        self.assertEqual(len(list(odometer((2, 3, 4)))), 24)
        self.assertEqual(list(odometer(())), [()])
        self.assertEqual(list(odometer((3, 0, 2))), [])


class TestArrayIterator(unittest.TestCase):
    def test_iterates_view_in_logical_order(self) -> None:
        a = NDArray(range(6), (2, 3))
        self.assertEqual(list(a.iter()), [0, 1, 2, 3, 4, 5])
        self.assertEqual(list(a.transpose()), [0, 3, 1, 4, 2, 5])
        self.assertEqual(list(a.flat()), [0, 1, 2, 3, 4, 5])

    def test_fresh_iterator_per_call(self) -> None:
        a = NDArray([1, 2, 3], (3,))
        it = a.iter()
        self.assertEqual(list(it), [1, 2, 3])
        self.assertEqual(list(it), [])
        self.assertEqual(list(a.iter()), [1, 2, 3])

    def test_yields_none_elements(self) -> None:
        a = NDArray([None, 1, None], (3,))
        self.assertEqual(list(a), [None, 1, None])

    def test_length_hint(self) -> None:
        it = ArrayIterator(NDArray(range(6), (2, 3)))
        self.assertEqual(it.__length_hint__(), 6)
        next(it)
        self.assertEqual(it.__length_hint__(), 5)

    def test_empty_array(self) -> None:
        self.assertEqual(list(NDArray([], (0, 3))), [])


class TestAxisIteration(unittest.TestCase):
    def test_axes_pairs(self) -> None:
        a = NDArray(range(24), (2, 3, 4))
        self.assertEqual(list(a.axes()), [(2, 12), (3, 4), (4, 1)])
        self.assertEqual(list(AxisIter((5,), (1,))), [(5, 1)])

    def test_axis_views(self) -> None:
        a = NDArray(range(6), (2, 3))
        self.assertEqual([v.to_list() for v in a.axis_views(0)], [[0, 1, 2], [3, 4, 5]])
        self.assertEqual(
            [v.to_list() for v in a.axis_views(1)], [[0, 3], [1, 4], [2, 5]]
        )
        for v in a.axis_views(1):
            self.assertEqual(v.shape, (2,))
            self.assertTrue(v.shares_buffer_with(a))

    def test_axis_views_of_flipped_view(self) -> None:
        a = NDArray(range(6), (2, 3)).flip(1)
        self.assertEqual([v.to_list() for v in a.axis_views(0)], [[2, 1, 0], [5, 4, 3]])


if __name__ == "__main__":
    unittest.main()
