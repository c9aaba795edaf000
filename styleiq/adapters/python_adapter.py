"""Python source adapter – builds a SourceUnit from ``ast`` and ``tokenize``."""

from __future__ import annotations

import ast
import io
import logging
import tokenize
from pathlib import Path

from styleiq.adapters.base import BaseSourceAdapter, SourceParseError, SourceUnit

__all__ = ["PythonSourceAdapter"]

logger = logging.getLogger(__name__)


class PythonSourceAdapter(BaseSourceAdapter):
    """Adapter that parses Python modules via the AST and the tokenizer."""

    def parse(self, text: str, path: Path) -> SourceUnit:
        try:
            tree = ast.parse(text, filename=str(path))
        except SyntaxError as exc:
            raise SourceParseError(path, exc.lineno or 1, exc.offset or 1, f"syntax error: {exc.msg}") from exc
        except (ValueError, RecursionError) as exc:
            raise SourceParseError(path, 1, 1, f"cannot parse source: {exc}") from exc
        tokens = self._tokenize(text, path)
        logger.debug("Parsed %s (%d tokens)", path, len(tokens))
        return SourceUnit(
            path=path, text=text, tree=tree,
            tokens=tokens, lines=tuple(line.rstrip("\r\n") for line in io.StringIO(text).readlines()),
        )

    @staticmethod
    def _tokenize(text: str, path: Path) -> tuple[tokenize.TokenInfo, ...]:
        reader = io.StringIO(text).readline
        try:
            return tuple(tokenize.generate_tokens(reader))
        except (tokenize.TokenError, SyntaxError) as exc:
            line, column = 1, 1
            if isinstance(exc, SyntaxError):
                line, column = exc.lineno or 1, exc.offset or 1
            elif len(exc.args) > 1 and isinstance(exc.args[1], tuple):
                line, column = exc.args[1][0], exc.args[1][1] + 1
            raise SourceParseError(path, line, column, f"tokenize error: {exc.args[0]}") from exc
