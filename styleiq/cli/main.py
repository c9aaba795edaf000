"""StyleIQ CLI – Typer multi-command application."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from styleiq.config.settings import ConfigError, StyleIQSettings, load_settings
from styleiq.core.engine import StyleIQEngine
from styleiq.core.registry import DuplicateRuleError
from styleiq.rules.base_rule import ViolationSeverity
from styleiq.utils.logger import (
    configure_logging, create_table, print_error, print_info, print_success, print_warning,
)

__all__ = ["app"]

app = typer.Typer(
    name="styleiq",
    help="Style-guide linter: indentation, naming, documentation and layout rules.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

EXIT_MISCONFIGURED = 2

_SEVERITY_COLOR = {ViolationSeverity.ERROR: "red", ViolationSeverity.WARNING: "yellow"}


class OutputFormat(str, Enum):
    text = "text"
    json = "json"


def _load_settings(config: Path | None) -> StyleIQSettings:
    try:
        return load_settings(config_path=config, search_dir=Path.cwd())
    except ConfigError as exc:
        print_error(escape(str(exc)))
        raise typer.Exit(code=EXIT_MISCONFIGURED)


def _load_engine(settings: StyleIQSettings) -> StyleIQEngine:
    try:
        return StyleIQEngine(settings=settings)
    except DuplicateRuleError as exc:
        print_error(escape(str(exc)))
        raise typer.Exit(code=EXIT_MISCONFIGURED)


@app.command()
def lint(
    paths: List[Path] = typer.Argument(..., help="Files or directories to lint (directories are scanned recursively)"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to styleiq.yaml"),
    output_format: OutputFormat = typer.Option(OutputFormat.text, "--format", help="Report format: text|json"),
    jobs: Optional[int] = typer.Option(None, "--jobs", "-j", min=1, help="Number of files linted concurrently"),
    max_line_length: Optional[int] = typer.Option(None, "--max-line-length", min=1, help="Override the maximum line length"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging on stderr"),
) -> None:
    """Lint source files and report style violations."""
    configure_logging(verbose)
    settings = _load_settings(config)
    if jobs is not None:
        settings.jobs = jobs
    if max_line_length is not None:
        settings.rules.max_line_length = max_line_length
    engine = _load_engine(settings)

    result = engine.run_lint(paths)
    report = result.report
    if output_format is OutputFormat.json:
        typer.echo(report.render_json(), nl=False)
    else:
        typer.echo(report.render_text(), nl=False)

    counts = report.counts()
    errors, warnings = counts[ViolationSeverity.ERROR], counts[ViolationSeverity.WARNING]
    summary = f"Checked {result.files_checked} file(s): {errors} error(s), {warnings} warning(s)."
    if result.has_errors:
        print_error(summary)
    elif warnings:
        print_warning(summary)
    else:
        print_success(summary)
    raise typer.Exit(code=result.exit_code)


@app.command()
def rules(
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to styleiq.yaml"),
) -> None:
    """List the registered rules in evaluation order."""
    engine = _load_engine(_load_settings(config))
    rows = []
    for rule in engine.list_rules():
        style = _SEVERITY_COLOR.get(rule.severity, "white")
        rows.append([rule.rule_id, f"[{style}]{rule.severity.value}[/{style}]", escape(rule.description)])
    table = create_table("Registered rules", [("Rule", "bold"), ("Severity", ""), ("Description", "")], rows)
    Console().print(table)
    print_info(f"{len(rows)} rule(s) registered.")


if __name__ == "__main__":
    app()
