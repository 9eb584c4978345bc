"""Rule registry — stores and orders pattern rules."""

from __future__ import annotations
import logging

from boogie.models import GenerationConfig, GenerationContext, PlacedRect, SizeClass
from boogie.rules.base import PatternRule

log = logging.getLogger(__name__)


class RuleRegistry:
    """
    Central registry for all pattern rules.

    Rules are registered at startup. During the fill, the registry
    returns the rules that apply to a candidate, sorted by priority.
    Rules are checked in that order and the first rejection wins.
    """

    def __init__(self) -> None:
        self._rules: dict[str, PatternRule] = {}

    def register(self, rule: PatternRule) -> None:
        """Register a pattern rule."""
        self._rules[rule.get_id()] = rule

    def unregister(self, rule_id: str) -> None:
        """Remove a rule from the registry."""
        self._rules.pop(rule_id, None)

    def get_rule(self, rule_id: str) -> PatternRule | None:
        return self._rules.get(rule_id)

    def list_rules(self) -> list[PatternRule]:
        """Return all registered rules."""
        return list(self._rules.values())

    def unknown_rule_ids(self, config: GenerationConfig) -> list[str]:
        """Rule ids named by the config that are not registered."""
        named = [*config.enabled_rules, *config.disabled_rules]
        return [rule_id for rule_id in named if rule_id not in self._rules]

    def get_active_rules(self, config: GenerationConfig) -> list[PatternRule]:
        """
        Return the rules switched on by the config, sorted by priority.

        Respects GenerationConfig.enabled_rules and disabled_rules.
        """
        candidates = list(self._rules.values())

        # If enabled_rules is specified, only use those
        if config.enabled_rules:
            candidates = [r for r in candidates if r.get_id() in config.enabled_rules]

        # Remove explicitly disabled rules
        if config.disabled_rules:
            candidates = [r for r in candidates if r.get_id() not in config.disabled_rules]

        # Lower priority runs first
        candidates.sort(key=lambda r: r.priority)
        return candidates

    def get_applicable_rules(
        self, config: GenerationConfig, size_class: SizeClass,
    ) -> list[PatternRule]:
        return [r for r in self.get_active_rules(config) if r.applies(size_class)]

    def first_rejection(
        self,
        sequence: list[PlacedRect],
        size_class: SizeClass,
        context: GenerationContext,
    ) -> PatternRule | None:
        """First rule, in priority order, that rejects the last entry of `sequence`."""
        for rule in self.get_applicable_rules(context.config, size_class):
            if not rule.allows(sequence, context):
                return rule
        return None

    def is_pattern_allowed(
        self,
        sequence: list[PlacedRect],
        size_class: SizeClass,
        context: GenerationContext,
    ) -> bool:
        rule = self.first_rejection(sequence, size_class, context)
        if rule is None:
            return True
        candidate = sequence[-1]
        log.debug("%s rejects %s candidate at (%g, %g)",
                  rule.get_id(), size_class.value, candidate.x, candidate.y)
        return False


def create_default_registry() -> RuleRegistry:
    """Create a registry with all standard pattern rules."""
    from boogie.rules.pattern.large_isolation import LargeIsolationRule
    from boogie.rules.pattern.small_cluster import SmallClusterRule

    registry = RuleRegistry()
    registry.register(SmallClusterRule())
    registry.register(LargeIsolationRule())
    return registry
