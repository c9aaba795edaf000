"""Rule: A non-empty file ends with exactly one newline."""
from __future__ import annotations
from typing import TYPE_CHECKING
from styleiq.rules.base_rule import BaseRule, RuleViolation, ViolationSeverity
if TYPE_CHECKING:
    from styleiq.adapters.base import SourceUnit

__all__ = ["FinalNewlineRule"]


class FinalNewlineRule(BaseRule):
    rule_id = "final-newline"
    description = "Files must end with a single newline character."
    severity = ViolationSeverity.WARNING

    def evaluate(self, unit: SourceUnit) -> list[RuleViolation]:
        if not unit.text:
            return []
        last_line = len(unit.lines)
        if not unit.text.endswith("\n"):
            return [self.violation(unit, last_line, len(unit.lines[-1]) + 1, "No newline at end of file")]
        if unit.text.endswith("\n\n") or unit.text.endswith("\n\r\n"):
            blank = last_line
            while blank > 1 and not unit.lines[blank - 2].strip():
                blank -= 1
            return [self.violation(unit, blank, 1, "Blank lines at end of file")]
        return []
