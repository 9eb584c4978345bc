"""Space-partition structures: the split tree and the occupancy grid."""

from __future__ import annotations
import math
from pydantic import BaseModel, ConfigDict, Field

from .geometry import Rect


class PartitionNode(Rect):
    """
    One rectangle of the partition tree.

    `parent` and `children` are indices into the owning tree's arena,
    never direct references.
    """
    model_config = ConfigDict(frozen=False)

    index: int
    depth: int = Field(default=0, ge=0)
    parent: int | None = None
    children: list[int] = []
    is_protected: bool = False

    @property
    def is_leaf(self) -> bool:
        return not self.children


class PartitionTree(BaseModel):
    """Arena of partition nodes; node 0 is the root."""
    nodes: list[PartitionNode] = []

    @classmethod
    def with_root(cls, bounds: Rect) -> PartitionTree:
        tree = cls()
        tree.add_node(bounds, depth=0, parent=None)
        return tree

    @property
    def root(self) -> PartitionNode:
        return self.nodes[0]

    def add_node(self, rect: Rect, depth: int, parent: int | None) -> PartitionNode:
        node = PartitionNode(
            x=rect.x, y=rect.y, w=rect.w, h=rect.h,
            index=len(self.nodes), depth=depth, parent=parent,
        )
        self.nodes.append(node)
        if parent is not None:
            self.nodes[parent].children.append(node.index)
        return node

    def get_parent(self, node: PartitionNode) -> PartitionNode | None:
        if node.parent is None:
            return None
        return self.nodes[node.parent]

    def get_children(self, node: PartitionNode) -> list[PartitionNode]:
        return [self.nodes[i] for i in node.children]

    def get_all_leaves(self, node: PartitionNode | None = None) -> list[PartitionNode]:
        """Pre-order leaves below `node` (the root by default)."""
        start = self.root if node is None else node
        leaves: list[PartitionNode] = []
        stack = [start.index]
        while stack:
            current = self.nodes[stack.pop()]
            if current.is_leaf:
                leaves.append(current)
            else:
                stack.extend(reversed(current.children))
        return leaves


class OccupancyGrid(BaseModel):
    """Coarse boolean grid; True marks a cell covered by a protected shape."""
    cols: int = Field(ge=0)
    rows: int = Field(ge=0)
    cell: float = Field(gt=0)
    cells: list[list[bool]] = []  # Indexed [row][col]

    @classmethod
    def empty(cls, width: float, height: float, cell: float) -> OccupancyGrid:
        cols = math.floor(width / cell)
        rows = math.floor(height / cell)
        return cls(
            cols=cols, rows=rows, cell=cell,
            cells=[[False] * cols for _ in range(rows)],
        )

    def cell_span(self, rect: Rect) -> tuple[int, int, int, int]:
        """Half-open (col0, row0, col1, row1) range of cells `rect` overlaps."""
        c0 = min(max(math.floor(rect.x / self.cell), 0), self.cols)
        r0 = min(max(math.floor(rect.y / self.cell), 0), self.rows)
        c1 = min(max(math.ceil(rect.right / self.cell), 0), self.cols)
        r1 = min(max(math.ceil(rect.bottom / self.cell), 0), self.rows)
        return c0, r0, c1, r1

    def is_occupied(self, col: int, row: int) -> bool:
        return self.cells[row][col]

    def to_rect(self, col: int, row: int, span_cols: int, span_rows: int) -> Rect:
        return Rect(
            x=col * self.cell,
            y=row * self.cell,
            w=span_cols * self.cell,
            h=span_rows * self.cell,
        )
