import random
from typing import List
from trailblazer.core.grid import Cell, Grid
from trailblazer.core.rand import get_random_int
from trailblazer.algo.base import Algorithm


class BinaryTree(Algorithm):
    """
    Binary tree method: every cell links to either its north or its east
    neighbour. The north row and the east column come out as long corridors.
    """

    def process(self, grid: Grid, rng: random.Random = None) -> Grid:
        if rng is None:
            rng = random.Random()

        for cell in grid:
            neighbors: List[Cell] = []
            if cell.north:
                neighbors.append(cell.north)
            if cell.east:
                neighbors.append(cell.east)

            # North-east corner has nowhere to go
            if neighbors:
                idx = get_random_int(rng, 0, len(neighbors))
                cell.link(neighbors[idx])

        return grid
