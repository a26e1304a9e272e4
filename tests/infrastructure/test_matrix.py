import unittest

from ndview import IndexOutOfBoundsError, Matrix, ShapeMismatchError


class TestMatrix(unittest.TestCase):
    def test_row_major_indexing(self) -> None:
        mat = Matrix([1, 2, 3, 4, 5, 6, 7, 8, 9], 3, 3)
        self.assertEqual(mat[1, 1], 5)
        self.assertEqual(mat[2, 0], 7)
        self.assertEqual(mat.shape, (3, 3))

    def test_value_count_must_match(self) -> None:
        with self.assertRaises(ShapeMismatchError):
            Matrix([1, 2, 3], 2, 2)

    def test_reshape_keeps_values(self) -> None:
        col = Matrix([1, 2, 3, 4], 2, 2).reshape(4, 1)
        self.assertEqual(col.shape, (4, 1))
        self.assertEqual(col[3, 0], 4)
        self.assertEqual(col.to_list(), [1, 2, 3, 4])

    def test_reshape_size_mismatch(self) -> None:
        with self.assertRaises(ShapeMismatchError):
            Matrix([1, 2, 3, 4], 2, 2).reshape(3, 1)

    def test_out_of_bounds(self) -> None:
        mat = Matrix([1, 2, 3, 4, 5, 6], 2, 3)
        with self.assertRaises(IndexOutOfBoundsError):
            mat[0, 3]
        with self.assertRaises(IndexOutOfBoundsError):
            mat[2, 0]


if __name__ == "__main__":
    unittest.main()
