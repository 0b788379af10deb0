import unittest

import numpy as np

from falling_blocks.game import Cell, GameGrid, Orientation, Piece, ShapeKind, format_grid


class GameGridTests(unittest.TestCase):
    def test_get_set_clear(self):
        grid = GameGrid(4, 6)
        grid.set(3, 5, Cell.Z)
        self.assertEqual(grid.get(3, 5), Cell.Z)
        self.assertFalse(grid.is_empty(3, 5))
        grid.clear()
        self.assertEqual(grid.filled_count(), 0)

    def test_out_of_range_is_contract_violation(self):
        grid = GameGrid(4, 4)
        with self.assertRaises(AssertionError):
            grid.get(4, 0)
        with self.assertRaises(AssertionError):
            grid.set(0, -1, Cell.I)

    def test_stamp_then_erase_restores_grid(self):
        grid = GameGrid(8, 8)
        for col in (0, 1, 5, 7):
            grid.set(7, col, Cell.J)
        before = grid.clone_state()
        piece = Piece(ShapeKind.T, Orientation.ROT90, x=2, y=3)
        grid.stamp(piece)
        self.assertEqual(grid.filled_count(), 8)
        grid.erase(piece)
        np.testing.assert_array_equal(grid.grid, before)

    def test_stamp_drops_rows_above_grid(self):
        grid = GameGrid(4, 6)
        grid.stamp(Piece(ShapeKind.T, Orientation.BASE, x=0, y=-1))
        self.assertEqual(grid.grid[0].tolist(), [0, 6, 6, 6, 0, 0])
        self.assertEqual(grid.filled_count(), 3)

    def test_completed_rows_only_within_given_span(self):
        grid = GameGrid(4, 4)
        grid.grid[3] = Cell.I
        grid.grid[2, :3] = Cell.O
        grid.grid[0] = Cell.S
        self.assertEqual(grid.completed_rows(range(2, 4)), [3])
        self.assertEqual(grid.completed_rows([-1, 3, 7]), [3])
        self.assertEqual(grid.completed_rows(range(0, 4)), [0, 3])

    def test_remove_rows_compacts_in_one_pass(self):
        grid = GameGrid(4, 4)
        grid.grid[0] = [1, 0, 0, 0]
        grid.grid[1] = [0, 2, 0, 0]
        grid.grid[2] = 3
        grid.grid[3] = 3
        self.assertEqual(grid.remove_rows([2, 3]), 2)
        self.assertEqual(grid.grid.tolist(), [[0, 0, 0, 0], [0, 0, 0, 0], [1, 0, 0, 0], [0, 2, 0, 0]])
        self.assertEqual(grid.grid.shape, (4, 4))

    def test_remove_rows_between_kept_rows(self):
        grid = GameGrid(5, 2)
        grid.grid[:, 0] = [1, 2, 3, 4, 5]
        grid.grid[1] = 7
        grid.grid[3] = 7
        grid.remove_rows([1, 3])
        self.assertEqual(grid.grid[:, 0].tolist(), [0, 0, 1, 3, 5])

    def test_count_clean_rows_looks_at_column_span(self):
        grid = GameGrid(5, 4)
        grid.set(2, 1, Cell.L)
        self.assertEqual(grid.count_clean_rows(0, 3), 2)
        self.assertEqual(grid.count_clean_rows(2, 3), 5)

    def test_format_grid(self):
        grid = GameGrid(2, 3)
        grid.set(1, 0, Cell.T)
        self.assertEqual(format_grid(grid.grid), "···\nT··")


if __name__ == "__main__":
    unittest.main()
