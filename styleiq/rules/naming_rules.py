"""Rules: Class names use CapWords, function and method names use snake_case."""
from __future__ import annotations
import ast
import re
from fnmatch import fnmatchcase
from typing import TYPE_CHECKING, Iterable
from styleiq.rules.base_rule import BaseRule, RuleViolation, ViolationSeverity
if TYPE_CHECKING:
    from styleiq.adapters.base import SourceUnit

__all__ = ["ClassNamingRule", "FunctionNamingRule", "DEFAULT_NAMING_EXEMPTIONS"]

_CAP_WORDS_RE = re.compile(r"^_*[A-Z][A-Za-z0-9]*$")
_SNAKE_CASE_RE = re.compile(r"^_*[a-z][a-z0-9_]*$")

# unittest hooks and ast.NodeVisitor dispatch methods
DEFAULT_NAMING_EXEMPTIONS: tuple[str, ...] = (
    "setUp", "tearDown", "setUpClass", "tearDownClass",
    "setUpModule", "tearDownModule", "asyncSetUp", "asyncTearDown",
    "visit_*", "generic_visit",
)


class ClassNamingRule(BaseRule):
    rule_id = "class-naming"
    description = "Class names must use CapWords."
    severity = ViolationSeverity.ERROR

    def evaluate(self, unit: SourceUnit) -> list[RuleViolation]:
        violations: list[RuleViolation] = []
        for node in ast.walk(unit.tree):
            if isinstance(node, ast.ClassDef) and not _CAP_WORDS_RE.match(node.name):
                violations.append(self.violation(
                    unit, node.lineno, node.col_offset + 1,
                    f"Class name '{node.name}' should use CapWords",
                ))
        return violations


class FunctionNamingRule(BaseRule):
    rule_id = "function-naming"
    description = "Function and method names must use snake_case."
    severity = ViolationSeverity.ERROR

    def __init__(self, exemptions: Iterable[str] = DEFAULT_NAMING_EXEMPTIONS, severity: ViolationSeverity | None = None) -> None:
        super().__init__(severity)
        self.exemptions = tuple(exemptions)

    def evaluate(self, unit: SourceUnit) -> list[RuleViolation]:
        violations: list[RuleViolation] = []
        for node in ast.walk(unit.tree):
            if not isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef)):
                continue
            name = node.name
            if _SNAKE_CASE_RE.match(name) or self._is_exempt(name):
                continue
            violations.append(self.violation(
                unit, node.lineno, node.col_offset + 1,
                f"Function name '{name}' should use snake_case",
            ))
        return violations

    def _is_exempt(self, name: str) -> bool:
        return any(fnmatchcase(name, pattern) for pattern in self.exemptions)
