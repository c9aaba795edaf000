"""Rule: Indent with spaces, in multiples of the configured indent size."""
from __future__ import annotations
import tokenize
from typing import TYPE_CHECKING
from styleiq.rules.base_rule import BaseRule, RuleViolation, ViolationSeverity
if TYPE_CHECKING:
    from styleiq.adapters.base import SourceUnit

__all__ = ["IndentationRule", "DEFAULT_INDENT_SIZE"]

DEFAULT_INDENT_SIZE = 4


class IndentationRule(BaseRule):
    rule_id = "indentation"
    description = "Blocks must be indented with spaces, in multiples of the indent size."
    severity = ViolationSeverity.WARNING

    def __init__(self, indent_size: int = DEFAULT_INDENT_SIZE, severity: ViolationSeverity | None = None) -> None:
        super().__init__(severity)
        self.indent_size = indent_size

    def evaluate(self, unit: SourceUnit) -> list[RuleViolation]:
        violations: list[RuleViolation] = []
        for tok in unit.tokens:
            if tok.type != tokenize.INDENT:
                continue
            line_no = tok.start[0]
            indent = tok.string
            if "\t" in indent:
                violations.append(self.violation(unit, line_no, 1, "Indentation contains tabs"))
            elif len(indent) % self.indent_size:
                violations.append(self.violation(
                    unit, line_no, 1,
                    f"Indentation of {len(indent)} spaces is not a multiple of {self.indent_size}",
                ))
        return violations
