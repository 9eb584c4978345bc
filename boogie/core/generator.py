"""Main composition generator — orchestrates analysis, partition and fill."""

from __future__ import annotations

from boogie.models import (
    Canvas, Composition, GenerationConfig, GenerationContext, GenerationParams,
    ProtectedShape, Rect,
)
from boogie.core.analyzer import ProtectedAnalyzer
from boogie.core.fill import FillController, PlaceCallback
from boogie.core.partition import PartitionTreeBuilder
from boogie.core.registry import RuleRegistry
from boogie.core.voids import VoidResolver


class CompositionGenerator:
    """
    Stateless composition generator.

    Takes canvas + protected shapes + seed, builds a fresh context,
    partitions the free space, runs the stop-on-balance fill, and returns
    a complete Composition. Same inputs, same output.
    """

    def __init__(self, registry: RuleRegistry) -> None:
        self.registry = registry
        self.analyzer = ProtectedAnalyzer()
        self.fill = FillController(registry)

    def generate(
        self,
        canvas: Canvas,
        protected: list[ProtectedShape],
        seed: str,
        params: GenerationParams | None = None,
        config: GenerationConfig | None = None,
        on_place: PlaceCallback | None = None,
    ) -> Composition:
        context = GenerationContext.create(canvas, protected, seed, params, config)

        # Analysis phase: diamond filter and tape roles
        self.analyzer.analyze(context)

        # Partition phase: candidate leaves
        context.leaves = self.partition(context)

        # Fill phase
        self.fill.run(context, on_place)

        return self._composition(context)

    def preview(
        self,
        canvas: Canvas,
        protected: list[ProtectedShape],
        seed: str,
        params: GenerationParams | None = None,
        config: GenerationConfig | None = None,
    ) -> Composition:
        """Protected shapes only, on the separate `base` stream."""
        # Analysis draws nothing; the stream is reserved for protected-only rendering
        context = GenerationContext.create(
            canvas, protected, seed, params, config, stream="base",
        )
        self.analyzer.analyze(context)
        return self._composition(context)

    def partition(self, context: GenerationContext) -> list[Rect]:
        layout = context.params.layout
        if context.config.strategy == "grid":
            resolver = VoidResolver(layout.cell)
            grid = resolver.build_grid(context.canvas, context.protected)
            return resolver.find_maximal_voids(grid)

        builder = PartitionTreeBuilder(layout, context.config.diamond)
        tree = builder.build_tree(context.protected, context.rng)
        return builder.fillable_leaves(tree)

    def _composition(self, context: GenerationContext) -> Composition:
        return Composition(
            canvas=context.canvas,
            diamond=context.config.diamond,
            seed=context.seed,
            white=context.params.color.white,
            protected=context.protected,
            placed=list(context.placed),
        )
