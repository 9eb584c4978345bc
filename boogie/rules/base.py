"""Abstract base class for all pattern rules.

Every rule in the system implements this interface. Rules are:
- Local: each judges only the newest candidate against the sequence so far
- Composable: multiple rules run in sequence via the registry
- Conditional: each rule decides which size classes it cares about
"""

from __future__ import annotations
from abc import ABC, abstractmethod

from boogie.models import GenerationContext, PlacedRect, SizeClass


class PatternRule(ABC):
    """
    Base class for all pattern rules.

    Subclasses implement `applies()` and `allows()`.
    The fill loop asks the registry for the rules that apply to the
    candidate's size class, sorted by `priority`, and rejects the
    candidate as soon as one of them returns False from `allows()`.
    """

    # Lower priority = runs first. Default 100.
    priority: int = 100

    @abstractmethod
    def get_id(self) -> str:
        """Unique identifier for this rule (e.g., 'pattern.small_cluster')."""
        ...

    @abstractmethod
    def get_name(self) -> str:
        """Human-readable name (e.g., 'Small Shapes Cluster')."""
        ...

    @abstractmethod
    def applies(self, size_class: SizeClass) -> bool:
        """Return True if this rule judges candidates of the given size class."""
        ...

    @abstractmethod
    def allows(self, sequence: list[PlacedRect], context: GenerationContext) -> bool:
        """
        Judge the last entry of `sequence`, the proposed extension of the
        accepted fill. Earlier entries are in acceptance order.
        """
        ...
