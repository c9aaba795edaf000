"""Rule: Public modules, classes and functions carry a docstring."""
from __future__ import annotations
import ast
from typing import TYPE_CHECKING, Union
from styleiq.rules.base_rule import BaseRule, RuleViolation, ViolationSeverity
if TYPE_CHECKING:
    from styleiq.adapters.base import SourceUnit

__all__ = ["DocstringRule"]

_Definition = Union[ast.ClassDef, ast.FunctionDef, ast.AsyncFunctionDef]


class DocstringRule(BaseRule):
    rule_id = "missing-docstring"
    description = "Public modules, classes and functions must have a docstring."
    severity = ViolationSeverity.WARNING

    def evaluate(self, unit: SourceUnit) -> list[RuleViolation]:
        violations: list[RuleViolation] = []
        tree = unit.tree
        if tree.body and ast.get_docstring(tree) is None and not unit.path.name.startswith("_"):
            violations.append(self.violation(unit, 1, 1, "Missing module docstring"))
        self._check_body(unit, tree.body, violations)
        return violations

    def _check_body(self, unit: SourceUnit, body: list[ast.stmt], violations: list[RuleViolation]) -> None:
        """Walk module and class bodies; function bodies are not public API."""
        for node in body:
            if not isinstance(node, (ast.ClassDef, ast.FunctionDef, ast.AsyncFunctionDef)):
                continue
            if not self._is_public(node):
                continue
            if ast.get_docstring(node) is None:
                kind = "class" if isinstance(node, ast.ClassDef) else "function"
                violations.append(self.violation(
                    unit, node.lineno, node.col_offset + 1,
                    f"Missing docstring in public {kind} '{node.name}'",
                ))
            if isinstance(node, ast.ClassDef):
                self._check_body(unit, node.body, violations)

    @staticmethod
    def _is_public(node: _Definition) -> bool:
        if node.name.startswith("__") and node.name.endswith("__"):
            return False
        return not node.name.startswith("_")
