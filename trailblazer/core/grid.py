from array import array
from typing import Iterator, List, Optional, Tuple


class Cell:
    """
    Lightweight view of one grid position. Holds no state of its own;
    neighbours and links are read from the owning grid's wall bitmasks.
    """
    __slots__ = ('grid', 'row', 'col')

    def __init__(self, grid: "Grid", row: int, col: int):
        self.grid = grid
        self.row = row
        self.col = col

    @property
    def north(self) -> Optional["Cell"]:
        return self.grid.neighbor(self.row, self.col, Grid.NORTH)

    @property
    def south(self) -> Optional["Cell"]:
        return self.grid.neighbor(self.row, self.col, Grid.SOUTH)

    @property
    def east(self) -> Optional["Cell"]:
        return self.grid.neighbor(self.row, self.col, Grid.EAST)

    @property
    def west(self) -> Optional["Cell"]:
        return self.grid.neighbor(self.row, self.col, Grid.WEST)

    def neighbors(self) -> List["Cell"]:
        return [self.grid[nr, nc] for nr, nc, _ in self.grid.get_neighbors(self.row, self.col)]

    def link(self, other: "Cell"):
        """Carves a passage to an adjacent cell. Both sides are updated."""
        self.grid.carve_path(self.row, self.col, self._direction_to(other))

    def is_linked(self, other: Optional["Cell"]) -> bool:
        if other is None:
            return False
        try:
            dir_bit = self._direction_to(other)
        except ValueError:
            return False
        return not self.grid.has_wall(self.row, self.col, dir_bit)

    def links(self) -> List["Cell"]:
        return [self.grid[nr, nc] for nr, nc in self.grid.get_open_neighbors(self.row, self.col)]

    def _direction_to(self, other: "Cell") -> int:
        if other.grid is not self.grid:
            raise ValueError("Cannot link cells from different grids")
        for dir_bit in Grid.DIRECTIONS:
            if (self.row + Grid.DR[dir_bit], self.col + Grid.DC[dir_bit]) == (other.row, other.col):
                return dir_bit
        raise ValueError(f"Cell {other.row, other.col} is not adjacent to {self.row, self.col}")

    def __eq__(self, other) -> bool:
        return (isinstance(other, Cell) and other.grid is self.grid
                and other.row == self.row and other.col == self.col)

    def __hash__(self) -> int:
        return hash((id(self.grid), self.row, self.col))

    def __repr__(self) -> str:
        return f"Cell({self.row}, {self.col})"


class Grid:
    # Bitmask Constants
    NORTH = 0b0001
    EAST  = 0b0010
    SOUTH = 0b0100
    WEST  = 0b1000

    # All walls present by default (N|E|S|W) = 15
    ALL_WALLS = NORTH | EAST | SOUTH | WEST

    # Direction Helpers (row 0 is the northern edge)
    DIRECTIONS = (NORTH, SOUTH, EAST, WEST)
    DR = {NORTH: -1, SOUTH: 1, EAST: 0, WEST: 0}
    DC = {NORTH: 0, SOUTH: 0, EAST: 1, WEST: -1}
    OPPOSITE = {NORTH: SOUTH, SOUTH: NORTH, EAST: WEST, WEST: EAST}

    __slots__ = ('rows', 'cols', 'cells')

    def __init__(self, rows: int, cols: int):
        self.rows = rows
        self.cols = cols
        # 'B' (unsigned char) -> 1 byte per cell
        self.cells = array('B', [self.ALL_WALLS] * (rows * cols))

    def reset(self):
        """Puts every wall back. Dimensions and neighbour topology are unchanged."""
        for i in range(len(self.cells)):
            self.cells[i] = self.ALL_WALLS

    def get_index(self, row: int, col: int) -> int:
        if 0 <= row < self.rows and 0 <= col < self.cols:
            return row * self.cols + col
        raise IndexError(f"Coordinate ({row}, {col}) out of bounds")

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def neighbor(self, row: int, col: int, dir_bit: int) -> Optional[Cell]:
        nr, nc = row + self.DR[dir_bit], col + self.DC[dir_bit]
        if self.in_bounds(nr, nc):
            return Cell(self, nr, nc)
        return None

    def carve_path(self, row: int, col: int, dir_bit: int):
        """
        Removes the wall between cell (row, col) and the neighbour in 'dir_bit'.
        Also removes the OPPOSITE wall from the neighbour.
        """
        idx1 = self.get_index(row, col)
        nr, nc = row + self.DR[dir_bit], col + self.DC[dir_bit]
        if not self.in_bounds(nr, nc):
            return  # Cannot carve into void

        self.cells[idx1] &= ~dir_bit
        self.cells[nr * self.cols + nc] &= ~self.OPPOSITE[dir_bit]

    def has_wall(self, row: int, col: int, dir_bit: int) -> bool:
        return (self.cells[row * self.cols + col] & dir_bit) != 0

    def get_neighbors(self, row: int, col: int) -> Iterator[Tuple[int, int, int]]:
        """
        Yields (nrow, ncol, direction_to_neighbor) for all valid grid neighbours.
        Does NOT check walls.
        """
        if row > 0:
            yield (row - 1, col, self.NORTH)
        if row < self.rows - 1:
            yield (row + 1, col, self.SOUTH)
        if col < self.cols - 1:
            yield (row, col + 1, self.EAST)
        if col > 0:
            yield (row, col - 1, self.WEST)

    def get_open_neighbors(self, row: int, col: int) -> Iterator[Tuple[int, int]]:
        """
        Yields (nrow, ncol) for neighbours that are NOT blocked by a wall.
        """
        val = self.cells[row * self.cols + col]

        if not (val & self.NORTH) and row > 0:
            yield (row - 1, col)
        if not (val & self.SOUTH) and row < self.rows - 1:
            yield (row + 1, col)
        if not (val & self.EAST) and col < self.cols - 1:
            yield (row, col + 1)
        if not (val & self.WEST) and col > 0:
            yield (row, col - 1)

    def __getitem__(self, pos: Tuple[int, int]) -> Cell:
        row, col = pos
        self.get_index(row, col)
        return Cell(self, row, col)

    def __iter__(self) -> Iterator[Cell]:
        # Row-major
        for row in range(self.rows):
            for col in range(self.cols):
                yield Cell(self, row, col)

    def __len__(self) -> int:
        return self.rows * self.cols

    def __str__(self) -> str:
        lines = ["+" + "---+" * self.cols]
        for row in range(self.rows):
            top = "|"
            bottom = "+"
            for col in range(self.cols):
                top += "   " + ("|" if self.has_wall(row, col, self.EAST) else " ")
                bottom += ("---" if self.has_wall(row, col, self.SOUTH) else "   ") + "+"
            lines.append(top)
            lines.append(bottom)
        return "\n".join(lines) + "\n"
