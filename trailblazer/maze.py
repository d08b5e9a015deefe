import logging
import random
from types import MappingProxyType
from typing import Mapping, Optional, Union

import numpy as np

from trailblazer.core.grid import Grid
from trailblazer.algo.base import Algorithm, AlgorithmType
from trailblazer.algo.binary_tree import BinaryTree

logger = logging.getLogger(__name__)

# One shared, stateless instance per algorithm. Add new strategies here.
ALGORITHMS: Mapping[AlgorithmType, Algorithm] = MappingProxyType({
    AlgorithmType.BINARY_TREE: BinaryTree(),
})


class UnknownAlgorithmError(ValueError):
    pass


class Maze:
    """
    An M x N grid of cells handed to a carving algorithm.

    Example:
        maze = Maze(10, 10, AlgorithmType.BINARY_TREE, seed=42)
        print(maze.string)
    """

    def __init__(self, rows: int, cols: int,
                 algorithm: Union[AlgorithmType, str] = AlgorithmType.BINARY_TREE,
                 seed: int = None):
        self._algorithms = ALGORITHMS
        self._algorithm: Optional[AlgorithmType] = None
        self._default_algorithm = algorithm
        self._grid: Optional[Grid] = None
        self.seed = seed
        self.rng = random.Random(seed)

        self.resize(rows, cols, algorithm)

    @property
    def algorithm(self) -> AlgorithmType:
        """The algorithm applied by the most recent build."""
        return self._algorithm

    @property
    def rows(self) -> int:
        return self._grid.rows

    @property
    def cols(self) -> int:
        return self._grid.cols

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def string(self) -> str:
        """ASCII drawing of the maze."""
        return str(self._grid)

    @property
    def array(self) -> np.ndarray:
        """
        (2*rows+1, 2*cols+1) uint8 array, 1 = wall, 0 = open.
        Cell (r, c) sits at (2r+1, 2c+1); the entry between two cells is open
        only when they are linked.
        """
        grid = self._grid
        out = np.ones((2 * grid.rows + 1, 2 * grid.cols + 1), dtype=np.uint8)
        for row in range(grid.rows):
            for col in range(grid.cols):
                y, x = 2 * row + 1, 2 * col + 1
                out[y, x] = 0
                if not grid.has_wall(row, col, Grid.EAST):
                    out[y, x + 1] = 0
                if not grid.has_wall(row, col, Grid.SOUTH):
                    out[y + 1, x] = 0
        return out

    def __str__(self) -> str:
        return self.string

    def _resolve(self, algorithm: Union[AlgorithmType, str]) -> AlgorithmType:
        try:
            key = AlgorithmType(algorithm)
            self._algorithms[key]
        except (ValueError, KeyError):
            raise UnknownAlgorithmError(f"Unknown algorithm: {algorithm!r}") from None
        return key

    def rebuild(self, algorithm: Union[AlgorithmType, str] = None):
        """
        Clears every passage and carves the grid again with 'algorithm'
        (default: the current one). The previous layout is lost.
        """
        if algorithm is None:
            algorithm = self._algorithm if self._algorithm is not None else self._default_algorithm
        key = self._resolve(algorithm)

        self._algorithm = key
        self._grid.reset()
        logger.debug(f"Carving {self._grid.rows}x{self._grid.cols} grid with {key.value}")
        self._algorithms[key].process(self._grid, self.rng)

    def resize(self, rows: int, cols: int, algorithm: Union[AlgorithmType, str] = None):
        """
        Replaces the grid with a fresh rows x cols one and rebuilds it.
        Without 'algorithm' the current one is reapplied.
        """
        rows = max(rows, 1)
        cols = max(cols, 1)
        if algorithm is None:
            algorithm = self._algorithm if self._algorithm is not None else self._default_algorithm
        key = self._resolve(algorithm)

        self._grid = Grid(rows, cols)
        self.rebuild(key)
