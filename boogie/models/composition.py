"""Composition input and output models."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field

from .geometry import Rect, DiamondBounds


TAPE_COLORS = ("#f2f2f2", "#f0f0f0", "#ededed")


class ShapeRole(str, Enum):
    NORMAL = "normal"
    TAPE = "tape"


class SizeClass(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class Canvas(BaseModel):
    """Drawing surface size in pixels."""
    width: float = Field(gt=0)
    height: float = Field(gt=0)

    @property
    def area(self) -> float:
        return self.width * self.height


class ProtectedShape(Rect):
    """An authored rectangle the generated fill must never overlap."""
    id: str
    color: str
    role: ShapeRole = ShapeRole.NORMAL


class PlacedRect(Rect):
    """A generated rectangle accepted by the fill loop."""
    color: str
    role: ShapeRole = ShapeRole.NORMAL


def classify_role(rect: Rect, color: str, cell: float) -> ShapeRole:
    """Long thin bars and tape-toned shapes read as tape."""
    long_thin = (
        (rect.w >= cell * 8 and rect.h <= cell * 2)
        or (rect.h >= cell * 8 and rect.w <= cell * 2)
    )
    if long_thin or color.lower() in TAPE_COLORS:
        return ShapeRole.TAPE
    return ShapeRole.NORMAL


class BalanceMetrics(BaseModel):
    """
    Area shares of a placed sequence relative to the paintable area
    (the diamond, not the full canvas).

    `max_color_ratio` is the largest share held by a single chromatic
    colour; white is bounded separately through `white_ratio`.
    """
    model_config = ConfigDict(frozen=True)

    filled_ratio: float = 0.0
    white_ratio: float = 0.0
    max_color_ratio: float = 0.0

    @classmethod
    def from_placed(
        cls, placed: list[PlacedRect], total: float, white: str,
    ) -> BalanceMetrics:
        filled = 0.0
        white_area = 0.0
        color_areas: dict[str, float] = {}
        for r in placed:
            a = r.area
            filled += a
            if r.color == white:
                white_area += a
            else:
                color_areas[r.color] = color_areas.get(r.color, 0.0) + a
        return cls(
            filled_ratio=filled / total,
            white_ratio=white_area / total,
            max_color_ratio=max(color_areas.values()) / total if color_areas else 0.0,
        )


class CompositionStats(BalanceMetrics):
    """Diagnostic summary handed to the renderer alongside the fill."""
    count: int = 0

    def rounded(self, digits: int = 3) -> dict[str, float | int]:
        return {
            "filled_ratio": round(self.filled_ratio, digits),
            "white_ratio": round(self.white_ratio, digits),
            "max_color_ratio": round(self.max_color_ratio, digits),
            "filled_rects": self.count,
        }


class Composition(BaseModel):
    """The complete generated composition."""
    canvas: Canvas
    diamond: DiamondBounds
    seed: str
    white: str
    protected: list[ProtectedShape]
    placed: list[PlacedRect]
    stats: CompositionStats = None  # type: ignore[assignment]

    def model_post_init(self, __context: object) -> None:
        if self.stats is None:
            metrics = BalanceMetrics.from_placed(self.placed, self.diamond.area, self.white)
            self.stats = CompositionStats(**metrics.model_dump(), count=len(self.placed))

    def draw_order(self) -> list[PlacedRect | ProtectedShape]:
        """
        Paint order for the renderer: generated fill first, then the
        protected shapes on top, tape bars last of all.
        """
        normal = [s for s in self.protected if s.role == ShapeRole.NORMAL]
        tape = [s for s in self.protected if s.role == ShapeRole.TAPE]
        return [*self.placed, *normal, *tape]
