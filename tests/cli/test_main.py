"""Test CLI main module"""

import subprocess
import sys
from pathlib import Path

import pytest
from lextables.cli.main import DEFAULT_KEYWORDS, build_tables, format_tables
from lextables.core.errors import UnopenableSourceError
from lextables.core.table_logger import TableLogger

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


class TestCliMain:
    """Test suite for CLI main"""

    def test_bundled_keywords_load(self, tmp_path):
        """Test the bundled reserved-word table is used by default"""
        lua_file = tmp_path / "test.lua"
        lua_file.write_text("local x = 1\n")

        reserved, _ = build_tables(lua_file)

        assert DEFAULT_KEYWORDS.is_file()
        assert reserved.find_index("int") == 0
        assert reserved.find_index("main") == 1

    def test_build_tables(self, tmp_path):
        """Test collecting tables from a simple Lua file"""
        lua_file = tmp_path / "test.lua"
        lua_file.write_text("""
local x = 42
local y = x + 10
main = y
""")
        logger = TableLogger()
        _, collector = build_tables(lua_file, logger=logger)

        assert collector.identifiers.all_keys() == ["x", "y"]
        assert collector.literals.all_keys() == ["42", "10"]
        assert logger.warnings == []

    def test_custom_keywords(self, tmp_path):
        """Test a custom reserved-word table"""
        keywords = tmp_path / "reserved.txt"
        keywords.write_text("0 x\n")
        lua_file = tmp_path / "test.lua"
        lua_file.write_text("local x = 1\nlocal main = 2\n")

        _, collector = build_tables(lua_file, keywords)
        assert collector.identifiers.all_keys() == ["main"]

    def test_missing_keywords_raises(self, tmp_path):
        """Test missing reserved-word file raises"""
        lua_file = tmp_path / "test.lua"
        lua_file.write_text("local x = 1\n")
        with pytest.raises(UnopenableSourceError):
            build_tables(lua_file, tmp_path / "missing.txt")

    def test_missing_file_raises_error(self, tmp_path):
        """Test that missing input file raises error"""
        with pytest.raises(FileNotFoundError):
            build_tables(tmp_path / "nonexistent.lua")

    def test_format_tables(self, tmp_path):
        """Test rendered table layout"""
        lua_file = tmp_path / "test.lua"
        lua_file.write_text("local count = 3\nlocal name = count\n")
        _, collector = build_tables(lua_file)

        text = format_tables(collector)
        assert "=== Identifiers (2) ===" in text
        assert "   0  count  integer=3" in text
        assert "   1  name   undefined" in text
        assert "=== Literals (1) ===" in text
        assert "   0  3  integer" in text

    def test_cli_run(self, tmp_path):
        """Test running the CLI as a module"""
        lua_file = tmp_path / "test.lua"
        lua_file.write_text("local x = 1\nprint(x)\n")

        result = subprocess.run(
            [sys.executable, "-m", "lextables.cli.main", str(lua_file), "--verbose"],
            capture_output=True,
            cwd=PROJECT_ROOT,
            text=True
        )

        assert result.returncode == 0, f"CLI failed: {result.stderr}"
        assert "=== Identifiers (2) ===" in result.stdout
        assert "=== Table Summary ===" in result.stdout

    def test_cli_missing_input(self, tmp_path):
        """Test CLI exits with status 1 for a missing input"""
        result = subprocess.run(
            [sys.executable, "-m", "lextables.cli.main", str(tmp_path / "nope.lua")],
            capture_output=True,
            cwd=PROJECT_ROOT,
            text=True
        )

        assert result.returncode == 1
        assert "Error: Input file not found" in result.stderr

    def test_cli_malformed_keywords(self, tmp_path):
        """Test CLI reports malformed reserved-word table"""
        keywords = tmp_path / "bad.txt"
        keywords.write_text("0 int\n1\n")
        lua_file = tmp_path / "test.lua"
        lua_file.write_text("local x = 1\n")

        result = subprocess.run(
            [sys.executable, "-m", "lextables.cli.main", str(lua_file), "-k", str(keywords)],
            capture_output=True,
            cwd=PROJECT_ROOT,
            text=True
        )

        assert result.returncode == 1
        assert "Malformed record #2" in result.stderr

    def test_cli_unreadable_input(self, tmp_path):
        """Test CLI reports a directory or non-UTF-8 input without a traceback"""
        bad_file = tmp_path / "bad.lua"
        bad_file.write_bytes(b"local x = '\xff'\n")

        for input_path in (tmp_path, bad_file):
            result = subprocess.run(
                [sys.executable, "-m", "lextables.cli.main", str(input_path)],
                capture_output=True,
                cwd=PROJECT_ROOT,
                text=True
            )

            assert result.returncode == 1
            assert result.stderr.startswith(f"Error: Cannot read {input_path}")
            assert "Traceback" not in result.stderr
