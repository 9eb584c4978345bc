"""Stop-on-balance fill — turns candidate leaves into placed rectangles."""

from __future__ import annotations
import logging
import math
from typing import Callable

from boogie.core.balance import BalanceEvaluator
from boogie.core.color import ColorPolicy
from boogie.core.registry import RuleRegistry
from boogie.models import (
    GenerationContext, PlacedRect, ProtectedShape, Rect, classify_role,
)

log = logging.getLogger(__name__)

PlaceCallback = Callable[[PlacedRect], None]


def clip_to_free_space(
    rect: Rect, protected: list[ProtectedShape], min_size: float,
) -> Rect | None:
    """
    Largest slab of `rect` beside (left, right, above or below) one of the
    protected shapes it overlaps that clears every protected shape and
    keeps both sides at `min_size` or more.
    """
    candidates: list[Rect] = []
    for prot in protected:
        if not rect.intersects(prot):
            continue
        slabs = []
        if rect.x < prot.x:
            slabs.append((rect.x, rect.y, prot.x - rect.x, rect.h))
        if rect.right > prot.right:
            slabs.append((prot.right, rect.y, rect.right - prot.right, rect.h))
        if rect.y < prot.y:
            slabs.append((rect.x, rect.y, rect.w, prot.y - rect.y))
        if rect.bottom > prot.bottom:
            slabs.append((rect.x, prot.bottom, rect.w, rect.bottom - prot.bottom))
        for x, y, w, h in slabs:
            if w >= min_size and h >= min_size:
                candidates.append(Rect(x=x, y=y, w=w, h=h))

    best: Rect | None = None
    for candidate in candidates:
        if any(candidate.intersects(prot) for prot in protected):
            continue
        if best is None or candidate.area > best.area:
            best = candidate
    return best


def trim_to_area(rect: Rect, budget: float, min_size: float) -> Rect | None:
    """
    Shorten the longer side of `rect`, keeping its top-left corner, until
    its area stays under `budget`. None if the trimmed side would drop
    below `min_size`.
    """
    if rect.area < budget:
        return rect
    if rect.w >= rect.h:
        # One pixel short of the budget so the ratio check has headroom
        length = math.floor(budget / rect.h) - 1
        trimmed = (rect.x, rect.y, length, rect.h)
    else:
        length = math.floor(budget / rect.w) - 1
        trimmed = (rect.x, rect.y, rect.w, length)
    if length < min_size:
        return None
    x, y, w, h = trimmed
    return Rect(x=x, y=y, w=w, h=h)


class FillController:
    """
    Visits leaves in raster order and accepts them one at a time.

    The fill runs in two phases. While the white ratio is below the
    balance floor it lays the white ground: candidates are painted white
    and trimmed to the per-step growth budget. Afterwards candidates get
    palette colours. Pattern-rule, clipping and trimming rejections skip
    to the next leaf; the first balance rejection ends the whole fill.
    """

    def __init__(self, registry: RuleRegistry) -> None:
        self.registry = registry

    def run(
        self, context: GenerationContext, on_place: PlaceCallback | None = None,
    ) -> list[PlacedRect]:
        params = context.params
        min_size = params.layout.min_split_size
        policy = ColorPolicy(params.color, params.layout.cell)
        evaluator = BalanceEvaluator(
            params.balance, context.config.diamond.area, params.color.white,
        )

        for leaf in sorted(context.leaves, key=lambda r: (r.y, r.x)):
            rect = self._fit(leaf, context, min_size)
            if rect is None:
                continue

            if evaluator.below_white_floor(context.metrics):
                if context.metrics is not None:
                    rect = trim_to_area(rect, evaluator.jump_budget, min_size)
                    if rect is None:
                        continue
                color = params.color.white
            else:
                neighbors = context.index.find_neighbors(rect)
                color = policy.choose_color(rect, neighbors, context.rng)

            candidate = PlacedRect(
                x=rect.x, y=rect.y, w=rect.w, h=rect.h,
                color=color,
                role=classify_role(rect, color, params.layout.cell),
            )

            proposal = [*context.placed, candidate]
            size_class = policy.classify(candidate)
            if not self.registry.is_pattern_allowed(proposal, size_class, context):
                continue

            metrics = evaluator.evaluate(proposal)
            if not evaluator.is_improvement(metrics, context.metrics):
                log.debug("Balance envelope reached after %d rectangles", len(context.placed))
                break

            context.add_placed(candidate, metrics)
            if on_place is not None:
                on_place(candidate)

        log.info("Filled %d rectangles", len(context.placed))
        return context.placed

    def _fit(self, leaf: Rect, context: GenerationContext, min_size: float) -> Rect | None:
        """Clip a leaf to the diamond and around protected shapes."""
        rect = context.config.diamond.clip_rect(leaf)
        if rect is None or rect.w < min_size or rect.h < min_size:
            return None
        if context.intersecting_protected(rect):
            rect = clip_to_free_space(rect, context.protected, min_size)
        return rect
