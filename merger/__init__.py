"""
merger: scalanie handbooków i statystyki pokrycia.

Publiczne API:
  merge_documents(documents)          → TranslationDictionary
  ordered_union(groups)               → list[str]
  section_counts(entries)             → dict[str, int]
  language_counts(entries, languages) → dict[str, int]
  missing_entries(entries, language)  → list[MergedEntry]
"""

from .engine import merge_documents, ordered_union
from .stats import language_counts, missing_entries, section_counts

__all__ = [
    "merge_documents",
    "ordered_union",
    "section_counts",
    "language_counts",
    "missing_entries",
]
