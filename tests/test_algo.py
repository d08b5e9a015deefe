import unittest
import random
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from trailblazer.core.grid import Grid
from trailblazer.core.complexity import MazeStats
from trailblazer.algo.binary_tree import BinaryTree


class FirstChoice(random.Random):
    """Always draws the lowest index."""
    def randrange(self, start, stop=None, step=1):
        return start if stop is not None else 0


class TestBinaryTree(unittest.TestCase):
    def test_spanning_tree(self):
        for rows, cols, seed in [(20, 20, 42), (7, 13, 1), (13, 7, 2), (1, 1, 3)]:
            grid = Grid(rows, cols)
            BinaryTree().process(grid, random.Random(seed))
            self.assertEqual(MazeStats.count_links(grid), rows * cols - 1)
            self.assertTrue(MazeStats.is_connected(grid))

    def test_returns_same_grid(self):
        grid = Grid(4, 4)
        self.assertIs(BinaryTree().process(grid, random.Random(0)), grid)
        self.assertEqual((grid.rows, grid.cols), (4, 4))

    def test_empty_grid(self):
        grid = Grid(0, 0)
        self.assertIs(BinaryTree().process(grid), grid)
        self.assertEqual(len(grid.cells), 0)

    def test_determinism(self):
        grid1 = Grid(10, 10)
        BinaryTree().process(grid1, random.Random(12345))

        grid2 = Grid(10, 10)
        BinaryTree().process(grid2, random.Random(12345))

        self.assertEqual(grid1.cells.tobytes(), grid2.cells.tobytes())

    def test_north_row_and_east_column_are_corridors(self):
        grid = Grid(6, 8)
        BinaryTree().process(grid, random.Random(99))
        for col in range(grid.cols - 1):
            self.assertTrue(grid[0, col].is_linked(grid[0, col + 1]))
        for row in range(1, grid.rows):
            self.assertTrue(grid[row, grid.cols - 1].is_linked(grid[row - 1, grid.cols - 1]))

    def test_candidate_order_is_north_then_east(self):
        grid = Grid(3, 3)
        BinaryTree().process(grid, FirstChoice())
        # Index 0 is north wherever a north neighbour exists
        for cell in grid:
            if cell.north:
                self.assertTrue(cell.is_linked(cell.north))
                self.assertFalse(cell.is_linked(cell.east))
            elif cell.east:
                self.assertTrue(cell.is_linked(cell.east))

    def test_corner_carves_nothing(self):
        grid = Grid(1, 1)
        BinaryTree().process(grid, random.Random(5))
        self.assertEqual(grid[0, 0].links(), [])

    def test_shared_instance_keeps_no_grid(self):
        algo = BinaryTree()
        algo.process(Grid(3, 3), random.Random(1))
        self.assertEqual(vars(algo), {})

if __name__ == '__main__':
    unittest.main()
