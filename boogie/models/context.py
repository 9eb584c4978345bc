"""Generation context — accumulates state during a single composition run."""

from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field

from boogie.core.rng import SeededRng
from boogie.core.spatial_index import SpatialIndex
from .composition import Canvas, ProtectedShape, PlacedRect, BalanceMetrics
from .geometry import Rect
from .parameters import GenerationParams, GenerationConfig


class GenerationContext(BaseModel):
    """
    Holds all state during a single generation pass.

    Analyzers narrow and tag the protected shapes.
    The partition stage adds candidate leaves.
    The fill loop appends placed rectangles.
    A fresh context is built for every run and dropped afterwards.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    # Input
    canvas: Canvas
    protected: list[ProtectedShape]
    seed: str
    params: GenerationParams = Field(default_factory=GenerationParams)
    config: GenerationConfig = Field(default_factory=GenerationConfig)

    # Per-run state
    rng: SeededRng
    index: SpatialIndex

    # Partition results (populated by the tree builder or void resolver)
    leaves: list[Rect] = []

    # Output (populated by the fill loop)
    placed: list[PlacedRect] = []
    metrics: BalanceMetrics | None = None

    @classmethod
    def create(
        cls,
        canvas: Canvas,
        protected: list[ProtectedShape],
        seed: str,
        params: GenerationParams | None = None,
        config: GenerationConfig | None = None,
        stream: str = "gen",
    ) -> GenerationContext:
        params = params or GenerationParams()
        return cls(
            canvas=canvas,
            protected=protected,
            seed=seed,
            params=params,
            config=config or GenerationConfig(),
            rng=SeededRng.for_stream(seed, stream),
            index=SpatialIndex([], canvas.width, canvas.height, params.layout.cell),
        )

    def add_placed(self, rect: PlacedRect, metrics: BalanceMetrics) -> None:
        self.placed.append(rect)
        self.index.insert(rect)
        self.metrics = metrics

    def intersecting_protected(self, rect: Rect) -> list[ProtectedShape]:
        return [p for p in self.protected if p.intersects(rect)]
