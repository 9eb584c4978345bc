"""Geometric primitives used throughout the generator."""

from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field


EDGE_TOLERANCE = 1e-9    # Edge coordinates closer than this count as equal
DIAMOND_EPSILON = 1e-3   # Boundary slack for the diamond inequality
CLIP_STEP = 1.0          # Scan step (pixels) of the edge-wise diamond clip


class Rect(BaseModel):
    """Axis-aligned rectangle in canvas pixels. Immutable."""
    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    w: float = Field(gt=0)
    h: float = Field(gt=0)

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    @property
    def area(self) -> float:
        return self.w * self.h

    @property
    def aspect_ratio(self) -> float:
        """Width over height."""
        return self.w / self.h

    @property
    def center(self) -> tuple[float, float]:
        return (self.x + self.w / 2, self.y + self.h / 2)

    def corners(self) -> list[tuple[float, float]]:
        return [
            (self.x, self.y),
            (self.right, self.y),
            (self.x, self.bottom),
            (self.right, self.bottom),
        ]

    def intersects(self, other: Rect) -> bool:
        """True when the interiors overlap (edge contact does not count)."""
        return (
            self.x < other.right
            and self.right > other.x
            and self.y < other.bottom
            and self.bottom > other.y
        )

    def contains(self, other: Rect) -> bool:
        return (
            self.x <= other.x
            and self.y <= other.y
            and self.right >= other.right
            and self.bottom >= other.bottom
        )

    def touches(self, other: Rect) -> bool:
        """Strict edge contact with overlapping span on the other axis."""
        touch_x = (
            abs(self.right - other.x) <= EDGE_TOLERANCE
            or abs(other.right - self.x) <= EDGE_TOLERANCE
        )
        overlap_y = self.y < other.bottom and self.bottom > other.y
        touch_y = (
            abs(self.bottom - other.y) <= EDGE_TOLERANCE
            or abs(other.bottom - self.y) <= EDGE_TOLERANCE
        )
        overlap_x = self.x < other.right and self.right > other.x
        return (touch_x and overlap_y) or (touch_y and overlap_x)

    def as_rect(self) -> Rect:
        """Plain geometry of this shape, dropping any subclass payload."""
        return Rect(x=self.x, y=self.y, w=self.w, h=self.h)


class DiamondBounds(BaseModel):
    """
    The rotated-square viewport the composition is clipped to.

    Defaults are the 400x400 canvas values, scaled down from the
    painting's own outline.
    """
    center_x: float = 200.0
    center_y: float = 196.0
    left_x: float = 20.0
    right_x: float = 380.0
    top_y: float = 14.0
    bottom_y: float = 375.0

    @property
    def half_width(self) -> float:
        return self.right_x - self.center_x

    @property
    def half_height(self) -> float:
        return self.bottom_y - self.center_y

    @property
    def area(self) -> float:
        """Area of the rhombus the composition is painted into."""
        return 2 * self.half_width * self.half_height

    def bounding_rect(self) -> Rect:
        return Rect(
            x=self.left_x,
            y=self.top_y,
            w=self.right_x - self.left_x,
            h=self.bottom_y - self.top_y,
        )

    def contains_point(self, x: float, y: float) -> bool:
        dx = abs(x - self.center_x) / self.half_width
        dy = abs(y - self.center_y) / self.half_height
        return dx + dy <= 1 + DIAMOND_EPSILON

    def contains_rect(self, rect: Rect) -> bool:
        # The diamond is convex, so four corners inside means all inside
        return all(self.contains_point(cx, cy) for cx, cy in rect.corners())

    def intersects_rect(self, rect: Rect) -> bool:
        if any(self.contains_point(cx, cy) for cx, cy in rect.corners()):
            return True
        # The whole diamond may sit inside a large rectangle
        if (
            rect.x <= self.center_x <= rect.right
            and rect.y <= self.center_y <= rect.bottom
        ):
            return True
        # A long bar may cross it with every corner outside
        nx = min(max(self.center_x, rect.x), rect.right)
        ny = min(max(self.center_y, rect.y), rect.bottom)
        return self.contains_point(nx, ny)

    def clip_rect(self, rect: Rect) -> Rect | None:
        """
        Shrink a rectangle until it fits inside the diamond.

        Edge-wise approximation rather than exact polygon clipping: for
        every corner outside, one of its two edges is pulled inwards by
        CLIP_STEP, the one on the axis where the corner overshoots most.
        The result is off by at most one step from the tightest fit along
        each edge.
        """
        corners = rect.corners()
        status = [self.contains_point(cx, cy) for cx, cy in corners]
        if all(status):
            return rect
        if not any(status):
            cx, cy = rect.center
            if not self.contains_point(cx, cy):
                return None

        edges = {"x0": rect.x, "y0": rect.y, "x1": rect.right, "y1": rect.bottom}
        while edges["x1"] - edges["x0"] >= 1 and edges["y1"] - edges["y0"] >= 1:
            moves: set[str] = set()
            for v, h in (("x0", "y0"), ("x1", "y0"), ("x0", "y1"), ("x1", "y1")):
                px, py = edges[v], edges[h]
                if self.contains_point(px, py):
                    continue
                can_v = px < self.center_x if v == "x0" else px > self.center_x
                can_h = py < self.center_y if h == "y0" else py > self.center_y
                over_x = abs(px - self.center_x) / self.half_width
                over_y = abs(py - self.center_y) / self.half_height
                if can_h and (over_y >= over_x or not can_v):
                    moves.add(h)
                elif can_v:
                    moves.add(v)
            if not moves and all(
                self.contains_point(edges[v], edges[h])
                for v in ("x0", "x1") for h in ("y0", "y1")
            ):
                return Rect(
                    x=edges["x0"], y=edges["y0"],
                    w=edges["x1"] - edges["x0"], h=edges["y1"] - edges["y0"],
                )
            if not moves:
                break
            for edge in moves:
                edges[edge] += CLIP_STEP if edge in ("x0", "y0") else -CLIP_STEP

        # Degenerate: fall back to the corners known to be inside
        inside = [c for c, ok in zip(corners, status) if ok]
        if not inside:
            return None
        min_x = max(self.left_x, min(c[0] for c in inside))
        max_x = min(self.right_x, max(c[0] for c in inside))
        min_y = max(self.top_y, min(c[1] for c in inside))
        max_y = min(self.bottom_y, max(c[1] for c in inside))
        if max_x - min_x < 1 or max_y - min_y < 1:
            return None
        fallback = Rect(x=min_x, y=min_y, w=max_x - min_x, h=max_y - min_y)
        return fallback if self.contains_rect(fallback) else None
