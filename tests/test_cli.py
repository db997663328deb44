"""Tests for the lispread command line."""

import json

import pytest

from lispread import read_expr
from lispread.cli import main


class TestCLI:
    def test_found_value(self, capsys):
        main(["#xFF"])
        assert capsys.readouterr().out == "Found value\n"

    def test_no_match(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["#b12"])
        assert exc_info.value.code == 1
        out = capsys.readouterr().out
        assert out.startswith('No match: "lisp" (line 1, col 4): invalid radix digits:')
        assert out.count("\n") == 1

    def test_json_output(self, capsys):
        main(['"a\\tb"', "--json"])
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "Found value"
        assert json.loads(lines[1]) == {"type": "string", "contents": "a\tb"}

    def test_extra_arguments_ignored(self, capsys):
        main(["foo", "bar", "baz"])
        assert capsys.readouterr().out == "Found value\n"

    def test_missing_argument(self):
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2

    @pytest.mark.parametrize("text", ["#xFF", "#b12", '"\\q"', "#d("])
    def test_output_matches_read_expr(self, capsys, text):
        try:
            main([text])
        except SystemExit:
            pass
        assert capsys.readouterr().out == read_expr(text) + "\n"
