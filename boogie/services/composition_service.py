"""High-level composition service — facade for the API layer."""

from __future__ import annotations
import logging

from boogie.models import (
    Canvas, Composition, GenerationConfig, GenerationParams, ProtectedShape,
)
from boogie.core.fill import PlaceCallback
from boogie.core.generator import CompositionGenerator
from boogie.core.registry import RuleRegistry, create_default_registry

log = logging.getLogger(__name__)


class CompositionService:
    """Validates input, delegates to the generator, reports on the output."""

    def __init__(self, registry: RuleRegistry | None = None) -> None:
        self.registry = registry or create_default_registry()
        self.generator = CompositionGenerator(self.registry)

    def generate(
        self,
        canvas: Canvas,
        protected: list[ProtectedShape],
        seed: str,
        params: GenerationParams | None = None,
        config: GenerationConfig | None = None,
        on_place: PlaceCallback | None = None,
    ) -> Composition:
        if params is None:
            params = GenerationParams()
        if config is None:
            config = GenerationConfig()
        self._check_rules(config)

        composition = self.generator.generate(
            canvas, protected, seed, params, config, on_place,
        )
        self.report(composition)
        return composition

    def preview(
        self,
        canvas: Canvas,
        protected: list[ProtectedShape],
        seed: str,
        params: GenerationParams | None = None,
        config: GenerationConfig | None = None,
    ) -> Composition:
        return self.generator.preview(canvas, protected, seed, params, config)

    def report(self, composition: Composition) -> dict[str, float | int]:
        """Rounded final metrics, also written to the log."""
        table = composition.stats.rounded()
        log.info(
            "Final report: filled_ratio=%s white_ratio=%s max_color_ratio=%s filled_rects=%s",
            table["filled_ratio"], table["white_ratio"],
            table["max_color_ratio"], table["filled_rects"],
        )
        return table

    def list_rules(self) -> list[dict[str, str]]:
        return [
            {"id": r.get_id(), "name": r.get_name()}
            for r in self.registry.list_rules()
        ]

    def _check_rules(self, config: GenerationConfig) -> None:
        unknown = self.registry.unknown_rule_ids(config)
        if unknown:
            raise ValueError(f"Unknown pattern rules: {', '.join(unknown)}")
