"""Exception hierarchy for command-reminder.

Every failure surfaced to the CLI derives from CommandReminderError so the
entry point can report it with a single handler.
"""

from __future__ import annotations


class CommandReminderError(Exception):
    """Base class for all command-reminder failures."""


class ConfigError(CommandReminderError):
    """The configuration file or an override could not be understood."""


class StoreReadError(CommandReminderError):
    """The reminders file could not be opened or read."""


class StoreWriteError(CommandReminderError):
    """The reminders file could not be rewritten."""


class MalformedStoreError(CommandReminderError):
    """The reminders file does not hold keyword/command line pairs."""


class AddRejectedError(CommandReminderError):
    def __init__(self, reason: str) -> None:
        super().__init__(f"Adding the command failed: '{reason}'")
        self.reason = reason


class InputReadError(CommandReminderError):
    """Reading the user's answer to a prompt failed."""


class MalformedCommandError(CommandReminderError):
    """A stored command line has no program to run."""


class RunCommandError(CommandReminderError):
    def __init__(self, command: str) -> None:
        super().__init__(f"Running the command '{command}' failed")
        self.command = command
