from collections import deque
from trailblazer.core.grid import Grid


class MazeStats:
    @staticmethod
    def popcount_walls(val: int) -> int:
        c = 0
        if val & Grid.NORTH: c += 1
        if val & Grid.EAST: c += 1
        if val & Grid.SOUTH: c += 1
        if val & Grid.WEST: c += 1
        return c

    @staticmethod
    def count_links(grid: Grid) -> int:
        # Only look south and east so each passage is counted once
        links = 0
        for row in range(grid.rows):
            for col in range(grid.cols):
                if row < grid.rows - 1 and not grid.has_wall(row, col, Grid.SOUTH):
                    links += 1
                if col < grid.cols - 1 and not grid.has_wall(row, col, Grid.EAST):
                    links += 1
        return links

    @staticmethod
    def is_connected(grid: Grid) -> bool:
        total = grid.rows * grid.cols
        if total == 0:
            return True

        seen = {(0, 0)}
        queue = deque([(0, 0)])
        while queue:
            row, col = queue.popleft()
            for nxt in grid.get_open_neighbors(row, col):
                if nxt not in seen:
                    seen.add(nxt)
                    queue.append(nxt)
        return len(seen) == total

    @staticmethod
    def is_perfect(grid: Grid) -> bool:
        """Spanning tree check: n - 1 links and every cell reachable."""
        total = grid.rows * grid.cols
        if total == 0:
            return True
        return MazeStats.count_links(grid) == total - 1 and MazeStats.is_connected(grid)

    @staticmethod
    def calculate_stats(grid: Grid):
        dead_ends = 0
        corridors = 0  # 2 walls
        junctions = 0  # 0, 1 walls

        # Boundary walls count, so a corner cell with one exit is a dead end
        for i in range(grid.rows * grid.cols):
            walls = MazeStats.popcount_walls(grid.cells[i])
            if walls == 3: dead_ends += 1
            elif walls == 2: corridors += 1
            elif walls <= 1: junctions += 1

        total = grid.rows * grid.cols
        return {
            "dead_ends": dead_ends,
            "corridors": corridors,
            "junctions": junctions,
            "links": MazeStats.count_links(grid),
            "dead_end_percent": (dead_ends / total) * 100 if total > 0 else 0
        }
