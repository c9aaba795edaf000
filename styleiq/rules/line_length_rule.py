"""Rule: Flag physical lines longer than the configured maximum."""
from __future__ import annotations
from typing import TYPE_CHECKING
from styleiq.rules.base_rule import BaseRule, RuleViolation, ViolationSeverity
if TYPE_CHECKING:
    from styleiq.adapters.base import SourceUnit

__all__ = ["LineLengthRule", "DEFAULT_MAX_LINE_LENGTH"]

DEFAULT_MAX_LINE_LENGTH = 140


class LineLengthRule(BaseRule):
    rule_id = "line-too-long"
    description = "Lines must not exceed the maximum line length."
    severity = ViolationSeverity.WARNING

    def __init__(self, max_length: int = DEFAULT_MAX_LINE_LENGTH, severity: ViolationSeverity | None = None) -> None:
        super().__init__(severity)
        self.max_length = max_length

    def evaluate(self, unit: SourceUnit) -> list[RuleViolation]:
        violations: list[RuleViolation] = []
        for line_no, line in enumerate(unit.lines, start=1):
            if len(line) > self.max_length:
                violations.append(self.violation(
                    unit, line_no, self.max_length + 1,
                    f"Line is {len(line)} characters long (maximum {self.max_length})",
                ))
        return violations
