"""Orchestration engine – ties settings, discovery, rules, evaluation and reporting together."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator

from styleiq.adapters.base import BaseSourceAdapter
from styleiq.adapters.python_adapter import PythonSourceAdapter
from styleiq.config.settings import StyleIQSettings
from styleiq.core.evaluator import RuleEvaluator
from styleiq.core.registry import RuleRegistry
from styleiq.core.report import ReportAggregator
from styleiq.rules.base_rule import BaseRule, RuleViolation
from styleiq.rules.docstring_rule import DocstringRule
from styleiq.rules.final_newline_rule import FinalNewlineRule
from styleiq.rules.indentation_rule import IndentationRule
from styleiq.rules.line_length_rule import LineLengthRule
from styleiq.rules.naming_rules import ClassNamingRule, FunctionNamingRule
from styleiq.rules.reserved_rules import RESERVED_RULE_IDS, IOErrorRule, SyntaxErrorRule
from styleiq.rules.trailing_whitespace_rule import TrailingWhitespaceRule

__all__ = ["StyleIQEngine", "LintResult", "build_registry"]

logger = logging.getLogger(__name__)


class LintResult:
    def __init__(self, report: ReportAggregator, files_checked: int) -> None:
        self.report = report
        self.files_checked = files_checked

    @property
    def violations(self) -> list[RuleViolation]:
        return self.report.violations

    @property
    def has_errors(self) -> bool:
        return self.report.has_errors

    @property
    def exit_code(self) -> int:
        return self.report.exit_code


def _default_rules(settings: StyleIQSettings) -> list[BaseRule]:
    cfg = settings.rules
    sev = cfg.severity
    rules: list[BaseRule] = [
        SyntaxErrorRule(sev.get(SyntaxErrorRule.rule_id)),
        IOErrorRule(sev.get(IOErrorRule.rule_id)),
        LineLengthRule(cfg.max_line_length, sev.get(LineLengthRule.rule_id)),
        IndentationRule(cfg.indent_size, sev.get(IndentationRule.rule_id)),
        TrailingWhitespaceRule(sev.get(TrailingWhitespaceRule.rule_id)),
        FinalNewlineRule(sev.get(FinalNewlineRule.rule_id)),
        ClassNamingRule(sev.get(ClassNamingRule.rule_id)),
        FunctionNamingRule(cfg.naming_exemptions, sev.get(FunctionNamingRule.rule_id)),
    ]
    if cfg.require_docstrings:
        rules.append(DocstringRule(sev.get(DocstringRule.rule_id)))
    return rules


def build_registry(settings: StyleIQSettings, extra_rules: Iterable[BaseRule] = ()) -> RuleRegistry:
    """Register the built-in rules, then *extra_rules*, honouring ``rules.disabled``."""
    disabled = set(settings.rules.disabled)
    for rule_id in sorted(disabled & RESERVED_RULE_IDS):
        logger.warning("Rule '%s' is reserved and cannot be disabled", rule_id)
    candidates = [*_default_rules(settings), *extra_rules]
    registry = RuleRegistry()
    for rule in candidates:
        if rule.rule_id in disabled and rule.rule_id not in RESERVED_RULE_IDS:
            logger.debug("Skipping disabled rule %s", rule.rule_id)
            continue
        registry.register(rule)
    known = {r.rule_id for r in candidates} | {DocstringRule.rule_id}
    for rule_id in sorted((disabled | set(settings.rules.severity)) - known):
        logger.warning("Configuration refers to unknown rule '%s'", rule_id)
    return registry


class StyleIQEngine:
    """Central orchestrator for a StyleIQ lint run."""

    def __init__(
        self,
        settings: StyleIQSettings,
        extra_rules: Iterable[BaseRule] = (),
        adapter: BaseSourceAdapter | None = None,
    ) -> None:
        self.settings = settings
        self.registry = build_registry(settings, extra_rules)
        self.evaluator = RuleEvaluator(self.registry, adapter or PythonSourceAdapter())

    def list_rules(self) -> tuple[BaseRule, ...]:
        return self.registry.all()

    def discover_files(self, paths: Iterable[Path]) -> Iterator[Path]:
        exts = tuple(self.settings.extensions)
        excluded = set(self.settings.exclude)
        for path in paths:
            if path.is_dir():
                for fp in sorted(path.rglob("*")):
                    if not fp.is_file() or fp.suffix not in exts:
                        continue
                    if any(part in excluded for part in fp.relative_to(path).parts[:-1]):
                        continue
                    yield fp
            else:
                if not path.exists():
                    logger.debug("Path does not exist: %s", path)
                yield path

    def run_lint(self, paths: Iterable[Path]) -> LintResult:
        files = list(dict.fromkeys(self.discover_files(paths)))
        logger.debug("Linting %d file(s) with %d rule(s)", len(files), len(self.registry))
        violations = self.evaluator.evaluate_paths(files, jobs=self.settings.jobs)
        return LintResult(report=ReportAggregator(violations), files_checked=len(files))
