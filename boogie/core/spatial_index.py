"""Uniform-grid bucket index for adjacency lookups during the fill."""

from __future__ import annotations
import math
from typing import TYPE_CHECKING, Iterable, TypeVar

if TYPE_CHECKING:
    from boogie.models.geometry import Rect

R = TypeVar("R", bound="Rect")


class SpatialIndex:
    """
    Buckets rectangles into every grid cell their bounding box overlaps.

    Two rectangles are neighbours when they share at least one bucket.
    """

    def __init__(
        self, rects: Iterable[Rect], width: float, height: float, cell_size: float,
    ) -> None:
        self.cell_size = cell_size
        self.cols = math.floor(width / cell_size)
        self.rows = math.floor(height / cell_size)
        self._buckets: list[list[list[Rect]]] = [
            [[] for _ in range(self.rows)] for _ in range(self.cols)
        ]
        self._count = 0
        for rect in rects:
            self.insert(rect)

    def __len__(self) -> int:
        return self._count

    def _span(self, rect: Rect) -> tuple[int, int, int, int]:
        x0 = min(max(math.floor(rect.x / self.cell_size), 0), self.cols)
        y0 = min(max(math.floor(rect.y / self.cell_size), 0), self.rows)
        x1 = min(max(math.ceil(rect.right / self.cell_size), 0), self.cols)
        y1 = min(max(math.ceil(rect.bottom / self.cell_size), 0), self.rows)
        return x0, y0, x1, y1

    def insert(self, rect: Rect) -> None:
        x0, y0, x1, y1 = self._span(rect)
        for col in range(x0, x1):
            for row in range(y0, y1):
                self._buckets[col][row].append(rect)
        self._count += 1

    def find_neighbors(self, rect: R) -> list[Rect]:
        """Rectangles sharing a bucket with `rect`, deduplicated, in bucket scan order."""
        x0, y0, x1, y1 = self._span(rect)
        seen: dict[int, Rect] = {}
        for col in range(x0, x1):
            for row in range(y0, y1):
                for other in self._buckets[col][row]:
                    if other is not rect and id(other) not in seen:
                        seen[id(other)] = other
        return list(seen.values())
