"""Ordered registry of style rules."""

from __future__ import annotations

from typing import Iterator

from styleiq.rules.base_rule import BaseRule

__all__ = ["RuleRegistry", "DuplicateRuleError"]


class DuplicateRuleError(Exception):
    def __init__(self, rule_id: str) -> None:
        self.rule_id = rule_id
        super().__init__(f"A rule with id '{rule_id}' is already registered")


class RuleRegistry:
    """Holds registered rules, unique by id, iterated in registration order."""

    def __init__(self, rules: list[BaseRule] | None = None) -> None:
        self._rules: dict[str, BaseRule] = {}
        for rule in rules or []:
            self.register(rule)

    def register(self, rule: BaseRule) -> BaseRule:
        if rule.rule_id in self._rules:
            raise DuplicateRuleError(rule.rule_id)
        rule.freeze()
        self._rules[rule.rule_id] = rule
        return rule

    def all(self) -> tuple[BaseRule, ...]:
        return tuple(self._rules.values())

    def get(self, rule_id: str) -> BaseRule | None:
        return self._rules.get(rule_id)

    @property
    def ids(self) -> list[str]:
        return list(self._rules)

    def __contains__(self, rule_id: object) -> bool:
        return rule_id in self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[BaseRule]:
        return iter(self.all())
