"""Derive the visible list from the source list and the search query."""

from __future__ import annotations

from typing import Iterable

from mushaf.models.entries import EntrySummary


def matches(entry: EntrySummary, query: str) -> bool:
    """Check whether one entry matches the query.

    Names match on a case-insensitive substring; the identifier only
    matches when the query is exactly its decimal form.
    """
    if not query:
        return True
    needle = query.casefold()
    return (
        needle in entry.name.casefold()
        or needle in entry.english_name.casefold()
        or str(entry.number) == query
    )


def filter_entries(entries: Iterable[EntrySummary], query: str) -> tuple[EntrySummary, ...]:
    """Return the entries matching *query*, in source order."""
    return tuple(entry for entry in entries if matches(entry, query))
