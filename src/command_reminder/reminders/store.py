"""Reminder store — add, remove and search over the reminders file.

The file is the source of truth. Every operation reads it whole, works on the
line list in memory, and rewrites it whole. There is no locking: two
invocations racing between read and write lose the earlier write.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from command_reminder.errors import (
    AddRejectedError,
    InputReadError,
    StoreReadError,
    StoreWriteError,
)
from command_reminder.reminders.codec import (
    check_pairing,
    format_keyword_line,
    has_line_break,
    parse,
    serialize,
)
from command_reminder.reminders.keywords import find_matches, merge
from command_reminder.runner import run_command

if TYPE_CHECKING:
    from command_reminder.config import StorePathProvider
    from command_reminder.prompts import Prompter
    from command_reminder.runner import Runner

logger = logging.getLogger(__name__)

NO_MATCHES_MESSAGE = "No commands found with any of the given keywords"
MERGE_QUESTION = "A reminder already exists for the given command. Merge keywords? (y/n) "


class ReminderStore:
    """Keyword-tagged command reminders backed by a flat text file."""

    def __init__(
        self,
        path_provider: StorePathProvider,
        prompter: Prompter,
        runner: Runner,
        *,
        backup: bool = True,
    ) -> None:
        self._path_provider = path_provider
        self.prompter = prompter
        self.runner = runner
        self.backup = backup

    @property
    def path(self) -> Path:
        return self._path_provider()

    # ── File access ──────────────────────────────────────────

    def read_text(self) -> str:
        """Read the reminders file, creating it (and its directory) if absent."""
        path = self.path
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.touch(exist_ok=True)
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise StoreReadError(f"Reading the reminders file {path} failed") from exc

    def read_lines(self) -> list[str]:
        lines = parse(self.read_text())
        check_pairing(lines)
        logger.debug("Loaded %d reminders from %s", len(lines) // 2, self.path)
        return lines

    def write_lines(self, lines: list[str]) -> None:
        """Overwrite the reminders file with `lines`."""
        path = self.path
        try:
            if self.backup:
                self._backup(path)
            path.write_text(serialize(lines), encoding="utf-8")
        except OSError as exc:
            raise StoreWriteError(f"Writing the reminders file {path} failed") from exc
        logger.debug("Wrote %d reminders to %s", len(lines) // 2, path)

    def _backup(self, path: Path) -> None:
        """Copy the current file to reminders.bak, replacing any older backup."""
        if not path.exists():
            return
        backup_path = path.with_name(path.name + ".bak")
        backup_path.write_text(path.read_text(encoding="utf-8"), encoding="utf-8")

    # ── Operations ───────────────────────────────────────────

    def add(self, command: str, keywords: str) -> str:
        """Add `command` under `keywords`, or offer to merge into its existing record."""
        lines = self.read_lines()

        if not command.strip():
            raise AddRejectedError("Command was empty")
        if has_line_break(command):
            raise AddRejectedError("Command contains a line break")
        if has_line_break(keywords):
            raise AddRejectedError("Keywords contain a line break")

        for idx in range(1, len(lines), 2):
            if lines[idx] == command:
                return self._add_to_existing(lines, idx, keywords)

        lines.extend([format_keyword_line(keywords), command])
        self.write_lines(lines)
        logger.info("Added reminder: %s", command)
        return f"Added '{command}'"

    def _add_to_existing(self, lines: list[str], command_idx: int, keywords: str) -> str:
        try:
            approved = self.prompter.ask_yes_no(MERGE_QUESTION)
        except InputReadError:
            logger.warning("Could not read merge answer; leaving keywords unchanged")
            return ""
        if not approved:
            return ""

        lines[command_idx - 1] = merge(lines[command_idx - 1], keywords)
        self.write_lines(lines)
        logger.info("Merged keywords for %s: %s", lines[command_idx], lines[command_idx - 1])
        return f"Merged keywords for '{lines[command_idx]}'"

    def remove(self, keywords: str) -> str:
        """Remove commands matching any of the space separated `keywords`, asking for each."""
        lines = self.read_lines()
        matches = find_matches(lines, keywords.split(" "))

        confirmed = [idx for idx in matches if self._confirm_remove(lines[idx])]
        for idx in reversed(confirmed):
            logger.info("Removing reminder: %s", lines[idx])
            del lines[idx]
            del lines[idx - 1]

        self.write_lines(lines)
        if not confirmed:
            return ""
        return f"Removed {len(confirmed)} command(s)"

    def _confirm_remove(self, command: str) -> bool:
        try:
            return self.prompter.ask_yes_no(f'Remove "{command}"? (y/n) ')
        except InputReadError:
            # An unreadable answer counts as yes
            logger.warning("Could not read removal answer for %s; removing it", command)
            return True

    def search(self, keywords: list[str]) -> str:
        """Find commands tagged with any of `keywords` and run the one the user picks.

        Returns only when nothing was run; a successful run replaces this process.
        """
        lines = self.read_lines()
        commands = [lines[idx] for idx in find_matches(lines, keywords)]

        if not commands:
            return NO_MATCHES_MESSAGE

        if len(commands) == 1:
            if not self.prompter.ask_yes_no(f"Run '{commands[0]}'? (y/n) "):
                return ""
            chosen = commands[0]
        else:
            chosen = commands[self.prompter.ask_choice(commands)]

        logger.info("Running reminder: %s", chosen)
        run_command(self.runner, chosen)
