"""Tests for the reminders file line codec."""

import pytest

from command_reminder.errors import MalformedStoreError
from command_reminder.reminders.codec import (
    check_pairing,
    format_keyword_line,
    parse,
    serialize,
)


class TestParse:
    def test_empty_text(self):
        assert parse("") == []

    def test_trailing_newline_adds_no_line(self):
        assert parse("# list files\nls -la\n") == ["# list files", "ls -la"]

    def test_without_trailing_newline(self):
        assert parse("# a\nb") == ["# a", "b"]

    def test_only_newline_separates_lines(self):
        text = "# page\x0cbreak\nprintf '\x0c'\n# sep\necho a\u2028b\x1cc\x85d\n"
        assert parse(text) == ["# page\x0cbreak", "printf '\x0c'", "# sep", "echo a\u2028b\x1cc\x85d"]

    def test_crlf_line_endings(self):
        assert parse("# list files\r\nls -la\r\n") == ["# list files", "ls -la"]


class TestSerialize:
    def test_empty(self):
        assert serialize([]) == ""

    def test_single_trailing_newline(self):
        assert serialize(["# list files", "ls -la"]) == "# list files\nls -la\n"

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "# list files\nls -la\n",
            "# git undo\ngit reset --soft HEAD~1\n# disk usage du\ndu -sh .\n",
            "# page\x0cbreak\nprintf '\x0c'\n",
            "# sep\necho a\u2028b\u2029c\x0bd\n",
        ],
    )
    def test_round_trip(self, text: str):
        assert serialize(parse(text)) == text


class TestCheckPairing:
    def test_well_formed(self):
        check_pairing(["# a", "cmd", "# b", "other"])

    def test_empty_is_fine(self):
        check_pairing([])

    def test_odd_line_count(self):
        with pytest.raises(MalformedStoreError, match="odd number"):
            check_pairing(["# a", "cmd", "# dangling"])

    def test_keyword_line_without_marker(self):
        with pytest.raises(MalformedStoreError, match="Line 3"):
            check_pairing(["# a", "cmd", "no marker", "cmd2"])


def test_format_keyword_line():
    assert format_keyword_line("list files") == "# list files"
