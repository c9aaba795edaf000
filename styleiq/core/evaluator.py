"""Rule evaluation with per-rule failure isolation."""

from __future__ import annotations

import dataclasses
import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable

from styleiq.adapters.base import BaseSourceAdapter, SourceParseError, SourceUnit
from styleiq.adapters.python_adapter import PythonSourceAdapter
from styleiq.core.registry import RuleRegistry
from styleiq.rules.base_rule import BaseRule, RuleViolation, ViolationSeverity
from styleiq.rules.reserved_rules import IO_ERROR_RULE_ID, SYNTAX_ERROR_RULE_ID

__all__ = ["RuleEvaluator"]

logger = logging.getLogger(__name__)


class RuleEvaluator:
    """Apply every registered rule to parsed source units.

    A rule whose predicate raises is reported as a single ERROR violation
    under its own id for that file; the remaining rules still run. Files
    that cannot be read or parsed produce one ``io-error`` or
    ``syntax-error`` violation and are not evaluated further.
    """

    def __init__(self, registry: RuleRegistry, adapter: BaseSourceAdapter | None = None) -> None:
        self.registry = registry
        self.adapter = adapter or PythonSourceAdapter()

    def evaluate_unit(self, unit: SourceUnit) -> list[RuleViolation]:
        violations: list[RuleViolation] = []
        for rule in self.registry.all():
            violations.extend(self._apply(rule, unit))
        return violations

    def evaluate_file(self, path: Path) -> list[RuleViolation]:
        try:
            unit = self.adapter.load(path)
        except SourceParseError as exc:
            logger.debug("Parse failure in %s: %s", path, exc.message)
            return [self._reserved_violation(SYNTAX_ERROR_RULE_ID, str(path), exc.line, exc.column, exc.message)]
        except OSError as exc:
            logger.debug("Cannot read %s: %s", path, exc)
            return [self._reserved_violation(IO_ERROR_RULE_ID, str(path), 1, 1, f"cannot read file: {exc.strerror or exc}")]
        return self.evaluate_unit(unit)

    def evaluate_paths(self, paths: Iterable[Path], jobs: int = 1) -> list[RuleViolation]:
        files = list(paths)
        violations: list[RuleViolation] = []
        if jobs <= 1 or len(files) <= 1:
            for path in files:
                violations.extend(self.evaluate_file(path))
            return violations
        with ThreadPoolExecutor(max_workers=jobs) as pool:
            for result in pool.map(self.evaluate_file, files):
                violations.extend(result)
        return violations

    @staticmethod
    def _apply(rule: BaseRule, unit: SourceUnit) -> list[RuleViolation]:
        try:
            found = list(rule.evaluate(unit))
            for item in found:
                if not isinstance(item, RuleViolation):
                    raise TypeError(f"expected RuleViolation, got {type(item).__name__}")
        except Exception as exc:
            logger.debug("Rule %s crashed on %s", rule.rule_id, unit.path, exc_info=True)
            return [RuleViolation(
                rule_id=rule.rule_id, severity=ViolationSeverity.ERROR,
                file_path=unit.display_path, line=1, column=1,
                message=f"rule {rule.rule_id} crashed: {type(exc).__name__}: {exc}",
            )]
        return [v if v.rule_id == rule.rule_id else dataclasses.replace(v, rule_id=rule.rule_id) for v in found]

    def _reserved_violation(self, rule_id: str, file_path: str, line: int, column: int, message: str) -> RuleViolation:
        rule = self.registry.get(rule_id)
        severity = rule.severity if rule is not None else ViolationSeverity.ERROR
        return RuleViolation(
            rule_id=rule_id, severity=severity, file_path=file_path,
            line=line, column=column, message=message,
        )
