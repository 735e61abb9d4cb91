"""Tests for output helpers."""

import io

import pytest

from gremp.output import print_plain, print_toml


class TestPrintPlain:
    """Tests for print_plain."""

    def test_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Joins messages with spaces and ends with a newline."""
        print_plain("hello", "world")
        assert capsys.readouterr().out == "hello world\n"

    def test_no_markup(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Rich markup in line text is printed verbatim."""
        print_plain("1. [bold]not bold[/bold]")
        assert capsys.readouterr().out == "1. [bold]not bold[/bold]\n"

    def test_custom_file(self) -> None:
        """Writes to the given file object."""
        buf = io.StringIO()
        print_plain("3. Pick three.", file=buf)
        assert buf.getvalue() == "3. Pick three.\n"


class TestPrintToml:
    """Tests for print_toml."""

    def test_renders_keys_and_values(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Keys and values appear in the output."""
        print_toml({"pattern": "duct", "case_sensitive": True})
        output = capsys.readouterr().out
        assert 'pattern = "duct"' in output
        assert "case_sensitive = true" in output
