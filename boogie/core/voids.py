"""Void resolver — tiles the free cells of an occupancy grid with rectangles."""

from __future__ import annotations
import logging

from boogie.models import Canvas, OccupancyGrid, ProtectedShape, Rect

log = logging.getLogger(__name__)


class VoidResolver:
    """
    Greedy maximal-rectangle scan over a coarse occupancy grid.

    The result is a non-overlapping tiling of the empty cells. It is
    order-dependent and not guaranteed to find the largest possible
    rectangles.
    """

    def __init__(self, cell: float) -> None:
        self.cell = cell

    def build_grid(self, canvas: Canvas, protected: list[ProtectedShape]) -> OccupancyGrid:
        grid = OccupancyGrid.empty(canvas.width, canvas.height, self.cell)
        self.stamp(grid, protected)
        return grid

    def stamp(self, grid: OccupancyGrid, shapes: list[ProtectedShape]) -> None:
        """Mark every cell a shape's bounding box overlaps as occupied."""
        for shape in shapes:
            c0, r0, c1, r1 = grid.cell_span(shape)
            for row in range(r0, r1):
                for col in range(c0, c1):
                    grid.cells[row][col] = True

    def find_maximal_voids(self, grid: OccupancyGrid) -> list[Rect]:
        visited = [[False] * grid.cols for _ in range(grid.rows)]

        def free(col: int, row: int) -> bool:
            return not grid.cells[row][col] and not visited[row][col]

        voids: list[Rect] = []
        for row in range(grid.rows):
            for col in range(grid.cols):
                if not free(col, row):
                    continue

                width = 1
                while col + width < grid.cols and free(col + width, row):
                    width += 1

                height = 1
                while row + height < grid.rows and all(
                    free(c, row + height) for c in range(col, col + width)
                ):
                    height += 1

                for r in range(row, row + height):
                    for c in range(col, col + width):
                        visited[r][c] = True
                voids.append(grid.to_rect(col, row, width, height))

        log.debug("Found %d voids on a %dx%d grid", len(voids), grid.cols, grid.rows)
        return voids
