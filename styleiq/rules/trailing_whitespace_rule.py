"""Rule: Detect whitespace at the end of a line."""
from __future__ import annotations
from typing import TYPE_CHECKING
from styleiq.rules.base_rule import BaseRule, RuleViolation, ViolationSeverity
if TYPE_CHECKING:
    from styleiq.adapters.base import SourceUnit

__all__ = ["TrailingWhitespaceRule"]


class TrailingWhitespaceRule(BaseRule):
    rule_id = "trailing-whitespace"
    description = "Lines must not end with spaces or tabs."
    severity = ViolationSeverity.WARNING

    def evaluate(self, unit: SourceUnit) -> list[RuleViolation]:
        violations: list[RuleViolation] = []
        for line_no, line in enumerate(unit.lines, start=1):
            stripped = line.rstrip(" \t\f")
            if stripped != line:
                violations.append(self.violation(unit, line_no, len(stripped) + 1, "Trailing whitespace"))
        return violations
