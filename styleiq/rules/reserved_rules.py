"""Reserved rules that report files the engine could not evaluate."""
from __future__ import annotations
from typing import TYPE_CHECKING
from styleiq.rules.base_rule import BaseRule, RuleViolation, ViolationSeverity
if TYPE_CHECKING:
    from styleiq.adapters.base import SourceUnit

__all__ = ["SYNTAX_ERROR_RULE_ID", "IO_ERROR_RULE_ID", "SyntaxErrorRule", "IOErrorRule", "RESERVED_RULE_IDS"]

SYNTAX_ERROR_RULE_ID = "syntax-error"
IO_ERROR_RULE_ID = "io-error"
RESERVED_RULE_IDS = frozenset({SYNTAX_ERROR_RULE_ID, IO_ERROR_RULE_ID})


class SyntaxErrorRule(BaseRule):
    """Raised by the evaluator when a file fails to parse; never matches a parsed unit."""

    rule_id = SYNTAX_ERROR_RULE_ID
    description = "Source file could not be parsed."
    severity = ViolationSeverity.ERROR

    def evaluate(self, unit: SourceUnit) -> list[RuleViolation]:
        return []


class IOErrorRule(BaseRule):
    rule_id = IO_ERROR_RULE_ID
    description = "Source file could not be read."
    severity = ViolationSeverity.ERROR

    def evaluate(self, unit: SourceUnit) -> list[RuleViolation]:
        return []
