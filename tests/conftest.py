"""Shared pytest fixtures for the StyleIQ test suite."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Callable

import pytest

from styleiq.adapters.base import SourceUnit
from styleiq.adapters.python_adapter import PythonSourceAdapter
from styleiq.config.settings import StyleIQSettings

CLEAN_MODULE = textwrap.dedent('''\
    """Inventory helpers."""


    class Inventory:
        """Track item counts."""

        def __init__(self):
            self.items = {}

        def add_item(self, name, count=1):
            """Add *count* units of *name*."""
            self.items[name] = self.items.get(name, 0) + count
''')

BAD_CLASS_MODULE = textwrap.dedent('''\
    """Badly named class."""


    class inventory:
        """Lower-case class name."""
''')

BAD_FUNCTION_MODULE = textwrap.dedent('''\
    """Badly named function."""


    def computeTotal(values):
        """Sum the values."""
        return sum(values)
''')

MISSING_DOCSTRINGS_MODULE = textwrap.dedent('''\
    import os


    class Loader:
        def load(self, path):
            def _inner():
                return path
            return _inner()

        def _private(self):
            return os.sep


    def helper():
        return 1


    def _hidden():
        return 2
''')

TAB_INDENT_MODULE = '"""Tabs."""\n\n\ndef run():\n\t"""Run."""\n\treturn 1\n'

ODD_INDENT_MODULE = '"""Odd indent."""\n\n\ndef run():\n   """Run."""\n   return 1\n'

SYNTAX_ERROR_MODULE = "def broken(:\n    pass\n"

LONG_LINE_MODULE = '"""One long line."""\nVALUE = "' + "x" * 135 + '"\n'


@pytest.fixture
def adapter() -> PythonSourceAdapter:
    return PythonSourceAdapter()


@pytest.fixture
def make_unit(adapter: PythonSourceAdapter) -> Callable[..., SourceUnit]:
    def _make(text: str, name: str = "sample.py") -> SourceUnit:
        return adapter.parse(text, Path(name))
    return _make


@pytest.fixture
def default_settings() -> StyleIQSettings:
    return StyleIQSettings()


@pytest.fixture
def tmp_source_tree(tmp_path: Path) -> Path:
    pkg = tmp_path / "pkg"
    pkg.mkdir()
    (pkg / "clean.py").write_text(CLEAN_MODULE)
    (pkg / "bad_class.py").write_text(BAD_CLASS_MODULE)
    (pkg / "long_line.py").write_text(LONG_LINE_MODULE)
    (pkg / "notes.txt").write_text("class lower: pass\n")
    venv = tmp_path / ".venv" / "lib"
    venv.mkdir(parents=True)
    (venv / "vendored.py").write_text(BAD_CLASS_MODULE)
    return tmp_path
