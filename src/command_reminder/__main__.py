"""Entry point: command-reminder [-a COMMAND KEYWORDS | -r KEYWORDS | KEYWORD ...]

- "-a/--add":    remember COMMAND under KEYWORDS (offers a merge if it exists)
- "-r/--remove": remove commands matching any of KEYWORDS, asking for each
- keywords:      search, then run the chosen command in place of this process
"""

from __future__ import annotations

import argparse
import logging
import sys

from command_reminder import __version__
from command_reminder.config import load_config
from command_reminder.errors import CommandReminderError


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="command-reminder",
        description="Stores commands behind keywords and allows you to search for them later.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "-a",
        "--add",
        nargs=2,
        metavar=("command", "keywords"),
        help="Adds a command to your reminders with the given keywords.",
    )
    group.add_argument(
        "-r",
        "--remove",
        metavar="keywords",
        help="Removes a command matching any of the given keywords.",
    )
    parser.add_argument("search", nargs="*", help="Keywords to search for.")
    return parser


def _report(exc: BaseException) -> None:
    print(f"Error: {exc}", file=sys.stderr)
    cause = exc.__cause__
    while cause is not None:
        print(f"Caused by: {cause}", file=sys.stderr)
        cause = cause.__cause__


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.search and (args.add or args.remove is not None):
        parser.error(f"unexpected search keywords with --add/--remove: {' '.join(args.search)}")

    try:
        config = load_config()
    except CommandReminderError as exc:
        _report(exc)
        return 1
    _setup_logging(config.log_level)

    from command_reminder.prompts import ConsolePrompter
    from command_reminder.reminders import ReminderStore
    from command_reminder.runner import ProcessRunner

    store = ReminderStore(
        config.store_path_provider(),
        ConsolePrompter(),
        ProcessRunner(),
        backup=config.backup,
    )

    try:
        if args.add:
            command, keywords = args.add
            message = store.add(command, keywords)
        elif args.remove is not None:
            message = store.remove(args.remove)
        elif args.search:
            message = store.search(args.search)
        else:
            return 0
    except CommandReminderError as exc:
        _report(exc)
        return 1
    except KeyboardInterrupt:
        print()
        return 130

    if message:
        print(message)
    return 0


if __name__ == "__main__":
    sys.exit(main())
