"""Tests for the Python source adapter."""
from __future__ import annotations
import ast
import tokenize
from pathlib import Path
import pytest
from styleiq.adapters.base import SourceParseError
from styleiq.adapters.python_adapter import PythonSourceAdapter
from tests.conftest import CLEAN_MODULE, SYNTAX_ERROR_MODULE


class TestParse:
    def test_builds_source_unit(self, adapter) -> None:
        unit = adapter.parse(CLEAN_MODULE, Path("inventory.py"))
        assert isinstance(unit.tree, ast.Module)
        assert unit.lines[0] == '"""Inventory helpers."""'
        assert len(unit.lines) == CLEAN_MODULE.count("\n")
        assert any(t.type == tokenize.INDENT for t in unit.tokens)
        assert unit.display_path == "inventory.py"

    def test_crlf_lines_stripped(self, adapter) -> None:
        unit = adapter.parse("x = 1\r\ny = 2\r\n", Path("crlf.py"))
        assert unit.lines == ("x = 1", "y = 2")

    def test_syntax_error_raises(self, adapter) -> None:
        with pytest.raises(SourceParseError) as exc_info:
            adapter.parse(SYNTAX_ERROR_MODULE, Path("broken.py"))
        assert exc_info.value.line == 1 and exc_info.value.path == "broken.py"

    def test_null_bytes_raise(self, adapter) -> None:
        with pytest.raises(SourceParseError):
            adapter.parse("x = 1\x00\n", Path("nul.py"))


class TestLoad:
    def test_load_reads_file(self, adapter, tmp_path) -> None:
        path = tmp_path / "m.py"
        path.write_text(CLEAN_MODULE)
        assert adapter.load(path).text == CLEAN_MODULE

    def test_load_missing_file_raises_oserror(self, adapter, tmp_path) -> None:
        with pytest.raises(OSError):
            adapter.load(tmp_path / "missing.py")

    def test_load_strips_utf8_bom(self, adapter, tmp_path) -> None:
        path = tmp_path / "bom.py"
        path.write_bytes(b"\xef\xbb\xbf" + CLEAN_MODULE.encode("utf-8"))
        unit = adapter.load(path)
        assert unit.text == CLEAN_MODULE and unit.lines[0] == '"""Inventory helpers."""'

    def test_load_honours_coding_cookie(self, adapter, tmp_path) -> None:
        path = tmp_path / "latin.py"
        path.write_bytes(b'# -*- coding: latin-1 -*-\n"""Doc \xe9."""\n')
        assert adapter.load(path).lines[1] == '"""Doc é."""'

    def test_load_unknown_coding_cookie_raises(self, adapter, tmp_path) -> None:
        path = tmp_path / "weird.py"
        path.write_bytes(b"# -*- coding: no-such-codec -*-\nx = 1\n")
        with pytest.raises(SourceParseError) as exc_info:
            adapter.load(path)
        assert "encoding" in exc_info.value.message

    def test_load_invalid_utf8_reports_line(self, adapter, tmp_path) -> None:
        path = tmp_path / "bad.py"
        path.write_bytes(b"x = 1\nname = '\xe9'\n")
        with pytest.raises(SourceParseError) as exc_info:
            adapter.load(path)
        assert exc_info.value.line == 2
