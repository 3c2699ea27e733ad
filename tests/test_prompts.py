"""Tests for the console prompter."""

import io

import pytest

from command_reminder.errors import InputReadError
from command_reminder.prompts import ConsolePrompter, Prompter


def make_prompter(answers: str) -> tuple[ConsolePrompter, io.StringIO]:
    out = io.StringIO()
    return ConsolePrompter(stdin=io.StringIO(answers), stdout=out), out


def test_is_a_prompter():
    assert isinstance(ConsolePrompter(), Prompter)


class TestAskYesNo:
    @pytest.mark.parametrize("answer,expected", [("y", True), ("Y", True), ("n", False), ("N", False)])
    def test_recognized(self, answer: str, expected: bool):
        prompter, out = make_prompter(f"{answer}\n")
        assert prompter.ask_yes_no("Run? (y/n) ") is expected
        assert out.getvalue() == "Run? (y/n) "

    def test_reasks_on_unexpected(self):
        prompter, out = make_prompter("maybe\n yes\n y \n")
        assert prompter.ask_yes_no("Q? ") is True
        assert out.getvalue() == "Q? Unexpected response maybe\nQ? Unexpected response yes\nQ? "

    def test_eof_raises(self):
        prompter, _ = make_prompter("")
        with pytest.raises(InputReadError):
            prompter.ask_yes_no("Q? ")

    def test_eof_after_bad_answer(self):
        prompter, _ = make_prompter("what\n")
        with pytest.raises(InputReadError):
            prompter.ask_yes_no("Q? ")


class TestAskChoice:
    def test_returns_zero_based_index(self):
        prompter, out = make_prompter("2\n")
        assert prompter.ask_choice(["ls -la", "ls -d */"]) == 1
        assert out.getvalue() == "1: ls -la\n2: ls -d */\nSelect available command: "

    @pytest.mark.parametrize("bad", ["0", "3", "two", ""])
    def test_reasks_on_unrecognized(self, bad: str):
        prompter, out = make_prompter(f"{bad}\n1\n")
        assert prompter.ask_choice(["a", "b"]) == 0
        assert out.getvalue().count("Unrecognized response") == 1
        assert out.getvalue().count("Select available command: ") == 2

    def test_eof_raises(self):
        prompter, _ = make_prompter("")
        with pytest.raises(InputReadError):
            prompter.ask_choice(["a", "b"])
