"""Aggregation, ordering and rendering of rule violations."""

from __future__ import annotations

import json
from typing import Iterable

from styleiq.rules.base_rule import RuleViolation, ViolationSeverity

__all__ = ["ReportAggregator", "format_line"]


def format_line(violation: RuleViolation) -> str:
    return (
        f"{violation.file_path}:{violation.line}:{violation.column}: "
        f"[{violation.severity.value}] {violation.rule_id} {violation.message}"
    )


class ReportAggregator:
    """Collects violations from any number of files.

    Output is sorted by ``(file, line, column, rule_id)`` and deduplicated on
    that same key, so the rendered report does not depend on the order in
    which files or rules were evaluated.
    """

    def __init__(self, violations: Iterable[RuleViolation] = ()) -> None:
        self._by_key: dict[tuple[str, int, int, str], RuleViolation] = {}
        self.add(violations)

    def add(self, violations: Iterable[RuleViolation]) -> None:
        for v in violations:
            self._by_key.setdefault(v.sort_key, v)

    @property
    def violations(self) -> list[RuleViolation]:
        return [self._by_key[key] for key in sorted(self._by_key)]

    @property
    def has_errors(self) -> bool:
        return any(v.severity == ViolationSeverity.ERROR for v in self._by_key.values())

    @property
    def passed(self) -> bool:
        return not self.has_errors

    @property
    def exit_code(self) -> int:
        return 0 if self.passed else 1

    def counts(self) -> dict[ViolationSeverity, int]:
        result = {sev: 0 for sev in ViolationSeverity}
        for v in self._by_key.values():
            result[v.severity] += 1
        return result

    def render_text(self) -> str:
        lines = [format_line(v) for v in self.violations]
        return "\n".join(lines) + "\n" if lines else ""

    def render_json(self) -> str:
        payload = {
            "passed": self.passed,
            "counts": {sev.value: n for sev, n in self.counts().items()},
            "violations": [
                {
                    "file": v.file_path, "line": v.line, "column": v.column,
                    "severity": v.severity.value, "rule_id": v.rule_id, "message": v.message,
                }
                for v in self.violations
            ],
        }
        return json.dumps(payload, indent=2, sort_keys=True) + "\n"

    def __len__(self) -> int:
        return len(self._by_key)
