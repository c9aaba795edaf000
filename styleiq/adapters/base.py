"""Abstract source adapter and the parsed source model used by every rule."""

from __future__ import annotations

import ast
import io
import tokenize
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path


__all__ = ["SourceUnit", "SourceParseError", "BaseSourceAdapter"]


@dataclass(frozen=True)
class SourceUnit:
    """Structured representation of a single source file."""

    path: Path
    text: str
    tree: ast.Module
    tokens: tuple[tokenize.TokenInfo, ...] = ()
    lines: tuple[str, ...] = field(default=())

    @property
    def display_path(self) -> str:
        return str(self.path)


class SourceParseError(Exception):
    def __init__(self, path: Path | str, line: int, column: int, message: str) -> None:
        self.path = str(path)
        self.line = max(line, 1)
        self.column = max(column, 1)
        self.message = message
        super().__init__(f"{self.path}:{self.line}:{self.column}: {message}")


class BaseSourceAdapter(ABC):
    """Interface between raw source text and the rule engine."""

    @abstractmethod
    def parse(self, text: str, path: Path) -> SourceUnit:
        """Parse *text* into a :class:`SourceUnit` or raise :class:`SourceParseError`."""

    def load(self, path: Path) -> SourceUnit:
        """Read *path* and parse it. ``OSError`` propagates to the caller."""
        with open(path, "rb") as fh:
            raw = fh.read()
        try:
            encoding, _ = tokenize.detect_encoding(io.BytesIO(raw).readline)
        except SyntaxError as exc:
            raise SourceParseError(path, exc.lineno or 1, 1, f"bad encoding declaration: {exc.msg}") from exc
        try:
            text = raw.decode(encoding)
        except UnicodeDecodeError as exc:
            line = raw[: exc.start].count(b"\n") + 1
            raise SourceParseError(path, line, 1, f"file is not valid {encoding}: {exc.reason}") from exc
        return self.parse(text, path)
