"""Line codec for the reminders file."""

from __future__ import annotations

from command_reminder.errors import MalformedStoreError

MARKER = "#"


def parse(text: str) -> list[str]:
    """Split raw store text into lines. Empty text yields no lines.

    Only LF separates lines (a trailing CR is dropped), so form feeds and
    Unicode line separators inside a command stay part of that command.
    """
    if not text:
        return []
    if text.endswith("\n"):
        text = text[:-1]
    return [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]


def serialize(lines: list[str]) -> str:
    """Join lines back into store text with a single trailing newline."""
    if not lines:
        return ""
    return "\n".join(lines) + "\n"


def has_line_break(text: str) -> bool:
    return "\n" in text or "\r" in text


def format_keyword_line(keywords: str) -> str:
    return f"{MARKER} {keywords}"


def is_keyword_line(line: str) -> bool:
    return line.startswith(MARKER)


def check_pairing(lines: list[str]) -> None:
    """Raise MalformedStoreError unless lines are keyword/command pairs."""
    if len(lines) % 2:
        raise MalformedStoreError(
            f"Reminders file has an odd number of lines ({len(lines)}); "
            "expected keyword/command pairs"
        )
    for idx in range(0, len(lines), 2):
        if not is_keyword_line(lines[idx]):
            raise MalformedStoreError(
                f"Line {idx + 1} should be a keyword line starting with '{MARKER}': "
                f"{lines[idx]!r}"
            )
