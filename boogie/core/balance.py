"""Composition balance metrics and the acceptance test of the fill loop."""

from __future__ import annotations

from boogie.models import BalanceMetrics, BalanceParams, PlacedRect


class BalanceEvaluator:
    """
    Judges whether extending the fill keeps the composition balanced.

    Metrics are recomputed from the full sequence on every proposal,
    against a fixed total area, so `white_ratio` never decreases as the
    sequence grows.

    The white floor only binds once it has been reached. Before that the
    fill is still laying its white ground (see `below_white_floor`).
    """

    def __init__(self, params: BalanceParams, total: float, white: str) -> None:
        self.params = params
        self.total = total
        self.white = white

    @property
    def jump_budget(self) -> float:
        """Largest area a single acceptance may add."""
        return self.params.max_fill_jump * self.total

    def evaluate(self, sequence: list[PlacedRect]) -> BalanceMetrics:
        return BalanceMetrics.from_placed(sequence, self.total, self.white)

    def below_white_floor(self, metrics: BalanceMetrics | None) -> bool:
        white = 0.0 if metrics is None else metrics.white_ratio
        return white < self.params.min_white

    def is_improvement(self, next_: BalanceMetrics, prev: BalanceMetrics | None) -> bool:
        # The first candidate always seeds the sequence
        if prev is None:
            return True
        p = self.params
        if next_.white_ratio > p.max_white:
            return False
        if not self.below_white_floor(prev) and self.below_white_floor(next_):
            return False
        if next_.max_color_ratio > p.max_color_dominance:
            return False
        return next_.filled_ratio - prev.filled_ratio <= p.max_fill_jump
