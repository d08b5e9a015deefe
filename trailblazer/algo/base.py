import random
from abc import ABC, abstractmethod
from enum import Enum
from trailblazer.core.grid import Grid


class AlgorithmType(str, Enum):
    BINARY_TREE = "binary_tree"


class Algorithm(ABC):
    """
    A maze carving strategy. Implementations keep no state between calls and
    never hold on to the grid they are given, so one instance can be shared.
    """

    @abstractmethod
    def process(self, grid: Grid, rng: random.Random = None) -> Grid:
        """
        Carves passages in-place so the grid's links form a spanning tree.
        The grid must arrive with every wall present. Returns the same grid.
        """
        pass
