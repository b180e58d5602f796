"""Text formatting utilities for logging."""

from typing import Any, Iterable, Sequence


def format_entry(value: Any) -> str:
    """Format a matrix entry; the tropical INF renders as '-'."""
    return str(value)


def format_word(word: Sequence[int]) -> str:
    """Format a word of 0-based generator indices with 1-based letters."""
    if not word:
        return "ε"
    return "·".join(f"M{letter + 1}" for letter in word)


def format_path(path: Iterable[int]) -> str:
    """Format a node path as '1 → 3 → 2'."""
    return " → ".join(str(node) for node in path) or "∅"


def format_set(s: Iterable[Any]) -> str:
    """Format set for consistent display."""
    items = sorted(s, key=str)
    if not items:
        return "∅"
    return "{" + ", ".join(str(x) for x in items) + "}"
