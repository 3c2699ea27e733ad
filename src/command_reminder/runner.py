"""Hand a stored command over to the operating system.

A successful exec replaces this process image, so nothing after
`exec_replace` runs unless the exec failed.
"""

from __future__ import annotations

import logging
import os
from typing import NoReturn, Protocol, runtime_checkable

from command_reminder.errors import MalformedCommandError, RunCommandError

logger = logging.getLogger(__name__)


@runtime_checkable
class Runner(Protocol):
    """Protocol for the exec-replace capability."""

    def exec_replace(self, program: str, args: list[str]) -> NoReturn:
        """Replace the current process with `program args...`."""
        ...


def prepare(command_line: str) -> tuple[str, list[str]]:
    """Split a command line into its program and argument list."""
    program, _, remainder = command_line.partition(" ")
    if not program.strip():
        raise MalformedCommandError(f"Stored command {command_line!r} has no program")
    args = remainder.split(" ") if remainder else []
    return program, args


class ProcessRunner:
    """Runner backed by os.execvp (PATH lookup, argv[0] = program)."""

    def exec_replace(self, program: str, args: list[str]) -> NoReturn:
        command = " ".join([program, *args])
        logger.info("exec: %s", command)
        try:
            os.execvp(program, [program, *args])
        except OSError as exc:
            raise RunCommandError(command) from exc


def run_command(runner: Runner, command_line: str) -> NoReturn:
    """Prepare `command_line` and exec it through `runner`."""
    program, args = prepare(command_line)
    runner.exec_replace(program, args)
    # A runner that returns broke its contract; treat it as a failed run.
    raise RunCommandError(command_line)
