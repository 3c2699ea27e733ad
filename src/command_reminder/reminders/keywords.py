"""Keyword matching and merging over keyword lines."""

from __future__ import annotations

from collections.abc import Iterable

from command_reminder.reminders.codec import MARKER, format_keyword_line, is_keyword_line


def find_matches(lines: list[str], search_keywords: Iterable[str]) -> list[int]:
    """Return command-line indices of records whose keyword line matches.

    Matching is substring containment on the whole keyword line, so "foo"
    also matches a record tagged "foobar". Empty search terms are ignored.
    Only keyword positions are scanned, so a command that itself starts with
    the marker is never mistaken for a keyword line.
    """
    terms = [k for k in search_keywords if k]
    matches: list[int] = []
    for idx in range(0, len(lines) - 1, 2):
        line = lines[idx]
        if is_keyword_line(line) and any(term in line for term in terms):
            matches.append(idx + 1)
    return matches


def split_keywords(text: str) -> list[str]:
    return [token for token in text.split(" ") if token]


def merge(existing_keyword_line: str, new_keywords: str) -> str:
    """Union the tokens of an existing keyword line with new keywords.

    The marker is stripped from the set and re-added in front, so it appears
    exactly once regardless of iteration order.
    """
    tokens = dict.fromkeys(split_keywords(existing_keyword_line) + split_keywords(new_keywords))
    tokens.pop(MARKER, None)
    return format_keyword_line(" ".join(tokens))
