"""Ordered table of clamp rules, filled by scanning the rules package."""

from __future__ import annotations

import importlib
import inspect
import logging
import pkgutil
from collections.abc import Iterable, Iterator
from types import ModuleType

from strength_engine.exceptions import ConfigurationError
from strength_engine.rules.base import ClampRule

logger = logging.getLogger(__name__)


def _defined_rules(module: ModuleType) -> Iterator[type[ClampRule]]:
    """Concrete ClampRule classes defined (not merely imported) in *module*."""
    for _, obj in inspect.getmembers(module, inspect.isclass):
        if (
            issubclass(obj, ClampRule)
            and obj.__module__ == module.__name__
            and not inspect.isabstract(obj)
        ):
            yield obj


class ClampRuleRegistry:
    """Clamp rules keyed by id, evaluated in ``(order, rule_id)`` order.

    No two rules may share an id or an order slot, so when several
    biomarker flags are active the clamp sequence never depends on which
    rule happened to be registered last.
    """

    def __init__(self, rules: Iterable[ClampRule] = ()) -> None:
        self._rules: dict[str, ClampRule] = {}
        for rule in rules:
            self.register(rule)

    def discover_rules(self, package: ModuleType | None = None) -> None:
        """Import every module under *package* and register its rules.

        Defaults to ``strength_engine.rules``. Import errors propagate: a
        broken rule module must not silently drop a safety clamp.
        """
        if package is None:
            package = importlib.import_module("strength_engine.rules")
        for info in pkgutil.walk_packages(package.__path__, prefix=package.__name__ + "."):
            module = importlib.import_module(info.name)
            for rule_cls in _defined_rules(module):
                if rule_cls.rule_id not in self._rules:
                    self.register(rule_cls())

    def register(self, rule: ClampRule) -> None:
        """Add *rule*.

        Raises:
            ConfigurationError: If the id or the order is already taken.
        """
        if rule.rule_id in self._rules:
            raise ConfigurationError(f"Duplicate clamp rule id {rule.rule_id!r}")
        for other in self._rules.values():
            if other.order == rule.order:
                raise ConfigurationError(
                    f"Clamp rules {other.rule_id!r} and {rule.rule_id!r} "
                    f"share order {rule.order}"
                )
        self._rules[rule.rule_id] = rule
        logger.debug("Registered clamp rule %s v%s (order %d)", rule.rule_id, rule.version, rule.order)

    def ordered(self) -> tuple[ClampRule, ...]:
        """Rules in evaluation order."""
        return tuple(sorted(self._rules.values(), key=lambda r: (r.order, r.rule_id)))

    def __contains__(self, rule_id: object) -> bool:
        return rule_id in self._rules

    def __len__(self) -> int:
        return len(self._rules)


def default_rules() -> tuple[ClampRule, ...]:
    """Discover the built-in clamp rules, in evaluation order."""
    registry = ClampRuleRegistry()
    registry.discover_rules()
    return registry.ordered()
