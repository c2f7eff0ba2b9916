"""Data models for mushaf entities.

- entries: immutable entry summaries, details and sub-items
"""

from mushaf.models.entries import EntryDetail, EntrySummary, RevelationType, SubItem

__all__ = ["EntryDetail", "EntrySummary", "RevelationType", "SubItem"]
