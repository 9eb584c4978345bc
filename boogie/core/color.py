"""Colour assignment for candidate regions."""

from __future__ import annotations
import logging
from collections import Counter

from boogie.core.rng import SeededRng
from boogie.models import ColorParams, PlacedRect, Rect, SizeClass

log = logging.getLogger(__name__)


def classify_size(rect: Rect, cell: float) -> SizeClass:
    """Size class by area, measured in base-module cells."""
    unit = cell * cell
    if rect.area <= unit * 2:
        return SizeClass.SMALL
    if rect.area >= unit * 10:
        return SizeClass.LARGE
    return SizeClass.MEDIUM


class ColorPolicy:
    """Weighted palette draw with neighbour repulsion."""

    def __init__(self, params: ColorParams, cell: float) -> None:
        self.params = params
        self.cell = cell

    def classify(self, rect: Rect) -> SizeClass:
        return classify_size(rect, self.cell)

    def candidate_palette(self, neighbors: list[Rect]) -> tuple[list[str], list[float]]:
        """Palette minus colours already used by too many neighbours."""
        counts = Counter(n.color for n in neighbors if isinstance(n, PlacedRect))
        colors: list[str] = []
        weights: list[float] = []
        for entry in self.params.palette:
            if counts[entry.color] >= self.params.neighbor_repulsion:
                continue
            colors.append(entry.color)
            weights.append(entry.weight)
        if not colors:
            log.debug("Every colour repelled by neighbours, using the full palette")
            colors = [e.color for e in self.params.palette]
            weights = [e.weight for e in self.params.palette]
        return colors, weights

    def choose_color(self, rect: Rect, neighbors: list[Rect], rng: SeededRng) -> str:
        # Large regions read as negative space
        if rect.area > self.params.large_area_white_threshold:
            return self.params.white
        colors, weights = self.candidate_palette(neighbors)
        return rng.weighted_pick(colors, weights)
