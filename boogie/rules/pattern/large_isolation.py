"""Large blocks stand alone: no large block may touch another."""

from __future__ import annotations

from boogie.core.color import classify_size
from boogie.rules.base import PatternRule
from boogie.models import GenerationContext, PlacedRect, SizeClass


class LargeIsolationRule(PatternRule):

    priority = 20

    def get_id(self) -> str:
        return "pattern.large_isolation"

    def get_name(self) -> str:
        return "Large Blocks Isolated"

    def applies(self, size_class: SizeClass) -> bool:
        return size_class == SizeClass.LARGE

    def allows(self, sequence: list[PlacedRect], context: GenerationContext) -> bool:
        cell = context.params.layout.cell
        candidate = sequence[-1]
        for earlier in sequence[:-1]:
            if classify_size(earlier, cell) == SizeClass.LARGE and earlier.touches(candidate):
                return False
        return True
