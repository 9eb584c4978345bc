"""Small shapes come in groups, never as isolated flecks of colour."""

from __future__ import annotations

from boogie.core.color import classify_size
from boogie.rules.base import PatternRule
from boogie.models import GenerationContext, PlacedRect, SizeClass


class SmallClusterRule(PatternRule):
    """A small candidate needs company among the most recent entries."""

    priority = 10

    window = 3        # Entries inspected, the candidate included
    min_small = 2     # Small entries required inside the window

    def get_id(self) -> str:
        return "pattern.small_cluster"

    def get_name(self) -> str:
        return "Small Shapes Cluster"

    def applies(self, size_class: SizeClass) -> bool:
        return size_class == SizeClass.SMALL

    def allows(self, sequence: list[PlacedRect], context: GenerationContext) -> bool:
        # The opening entries have no full window to be judged against
        if len(sequence) < self.window:
            return True
        cell = context.params.layout.cell
        recent = sequence[-self.window:]
        small = sum(1 for r in recent if classify_size(r, cell) == SizeClass.SMALL)
        return small >= self.min_small
