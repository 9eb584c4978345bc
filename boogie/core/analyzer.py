"""Protected-shape analysis — diamond membership and tape roles."""

from __future__ import annotations
import logging

from boogie.models import GenerationContext, ProtectedShape, classify_role

log = logging.getLogger(__name__)


class ProtectedAnalyzer:
    """Narrows the protected shapes to the diamond and tags their roles."""

    def analyze(self, context: GenerationContext) -> None:
        """Run all analysis passes and update the context."""
        inside = self._filter_to_diamond(context)
        context.protected = self._tag_roles(context, inside)

    def _filter_to_diamond(self, context: GenerationContext) -> list[ProtectedShape]:
        """Keep only shapes that reach into the diamond, in input order."""
        diamond = context.config.diamond
        inside = [s for s in context.protected if diamond.intersects_rect(s)]
        dropped = len(context.protected) - len(inside)
        if dropped:
            log.debug("Dropped %d protected shapes outside the diamond", dropped)
        return inside

    def _tag_roles(
        self, context: GenerationContext, shapes: list[ProtectedShape],
    ) -> list[ProtectedShape]:
        cell = context.params.layout.cell
        return [
            s.model_copy(update={"role": classify_role(s, s.color, cell)})
            for s in shapes
        ]
