"""
Unit tests for the fluentstr command-line interface.
"""

import io
import json

import pytest

from fluentstr import __version__
from fluentstr.cli import TRANSFORMS, apply_operations, create_parser, main
from fluentstr.utils.errors import UnknownOperationError


class TestParser:
    """Tests for argument parsing."""

    def test_transform_arguments(self):
        """transform takes text and one or more operations."""
        args = create_parser().parse_args(["transform", "abc", "trim", "reverse"])
        assert args.command == "transform"
        assert args.text == "abc"
        assert args.operations == ["trim", "reverse"]

    def test_transform_requires_operation(self):
        """At least one operation is required."""
        with pytest.raises(SystemExit):
            create_parser().parse_args(["transform", "abc"])

    def test_version(self, capsys):
        """--version prints the package version."""
        with pytest.raises(SystemExit):
            main(["--version"])
        assert __version__ in capsys.readouterr().out


class TestApplyOperations:
    """Tests for apply_operations."""

    def test_operations_run_in_order(self):
        """Each operation sees the previous result."""
        assert apply_operations("  Hello, World! ", ["trim", "slugify"]) == "hello-world"
        assert apply_operations("abc", ["to_upper_case", "reverse"]) == "CBA"

    def test_unknown_operation(self):
        """Unknown names raise with the list of accepted ones."""
        with pytest.raises(UnknownOperationError) as exc_info:
            apply_operations("abc", ["explode"])
        assert exc_info.value.available == list(TRANSFORMS)
        assert "Available:" in str(exc_info.value)


class TestCommands:
    """Tests for the command handlers."""

    def test_transform(self, capsys):
        """The result is printed."""
        assert main(["transform", "foo_bar-baz", "camelize"]) == 0
        assert capsys.readouterr().out == "fooBarBaz\n"

    def test_transform_stdin(self, capsys, monkeypatch):
        """'-' reads standard input."""
        monkeypatch.setattr("sys.stdin", io.StringIO("Hello World\n"))
        assert main(["t", "-", "underscored"]) == 0
        assert capsys.readouterr().out == "Hello_World\n"

    def test_transform_unknown_operation(self, capsys):
        """Unknown operations exit with status 1."""
        assert main(["transform", "abc", "nope"]) == 1
        assert "unknown operation 'nope'" in capsys.readouterr().err

    def test_similarity(self, capsys):
        """Common count and percent."""
        assert main(["similarity", "World", "Word"]) == 0
        assert capsys.readouterr().out == "4 88.89\n"

    def test_similarity_json(self, capsys):
        """JSON output."""
        assert main(["sim", "abc", "abc", "--json"]) == 0
        assert json.loads(capsys.readouterr().out) == {"common": 3, "percent": 100.0}

    def test_explode(self, capsys):
        """One fragment per line."""
        assert main(["explode", "a,b,c", ",", "--limit", "2"]) == 0
        assert capsys.readouterr().out == "a\nb,c\n"

    def test_explode_json(self, capsys):
        """JSON array output."""
        assert main(["explode", "a,b,c", ",", "--json"]) == 0
        assert json.loads(capsys.readouterr().out) == ["a", "b", "c"]

    def test_explode_empty_delimiter(self, capsys):
        """An empty delimiter is reported as an error."""
        assert main(["explode", "abc", ""]) == 1
        assert "delimiter must not be empty" in capsys.readouterr().err

    def test_between(self, capsys):
        """Text between markers."""
        assert main(["between", "text[inner]more", "[", "]"]) == 0
        assert capsys.readouterr().out == "inner\n"

    def test_info(self, capsys):
        """info lists the transform operations."""
        assert main(["info"]) == 0
        out = capsys.readouterr().out
        assert __version__ in out
        assert "slugify" in out

    def test_no_command(self, capsys):
        """Without a command the help is printed."""
        assert main([]) == 0
        assert "usage:" in capsys.readouterr().out
