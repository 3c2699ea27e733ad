"""Interactive prompts: yes/no questions and picking one of several commands."""

from __future__ import annotations

import logging
import sys
from typing import Protocol, TextIO, runtime_checkable

from command_reminder.errors import InputReadError

logger = logging.getLogger(__name__)


@runtime_checkable
class Prompter(Protocol):
    """Protocol for asking the user questions."""

    def ask_yes_no(self, question: str) -> bool:
        """Return True for yes, False for no. Raises InputReadError."""
        ...

    def ask_choice(self, options: list[str]) -> int:
        """Return the zero-based index of the chosen option. Raises InputReadError."""
        ...


class ConsolePrompter:
    """Prompter that loops on stdin/stdout until it gets a usable answer."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin or sys.stdin
        self._stdout = stdout or sys.stdout

    def ask_yes_no(self, question: str) -> bool:
        while True:
            self._write(question)
            response = self._read_line().strip()
            if response in ("y", "Y"):
                return True
            if response in ("n", "N"):
                return False
            self._write(f"Unexpected response {response}\n")

    def ask_choice(self, options: list[str]) -> int:
        while True:
            for number, option in enumerate(options, start=1):
                self._write(f"{number}: {option}\n")
            self._write("Select available command: ")
            response = self._read_line().strip()
            try:
                choice = int(response)
            except ValueError:
                choice = 0
            if 1 <= choice <= len(options):
                return choice - 1
            self._write("Unrecognized response\n")

    def _write(self, text: str) -> None:
        try:
            self._stdout.write(text)
            self._stdout.flush()
        except OSError as exc:
            raise InputReadError("Writing the prompt failed") from exc

    def _read_line(self) -> str:
        try:
            line = self._stdin.readline()
        except OSError as exc:
            raise InputReadError("Reading input failed") from exc
        if not line:
            # EOF: no answer will ever come
            logger.debug("stdin closed while waiting for an answer")
            raise InputReadError("Reading input failed: end of input")
        return line
