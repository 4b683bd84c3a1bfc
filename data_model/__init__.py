"""
data_model: struktury danych słownika tłumaczeń handbooków.

Użycie:
  from data_model import SourceDocument, ParsedDocument, MergedEntry, ...

Moduły:
  documents: SourceDocument, ParsedDocument
  entries:   MergedEntry, TranslationDictionary, RESERVED_KEYS
"""

from .documents import (
    SourceDocument,
    ParsedDocument,
)
from .entries import (
    RESERVED_KEYS,
    MergedEntry,
    TranslationDictionary,
)

__all__ = [
    # documents
    "SourceDocument",
    "ParsedDocument",
    # entries
    "RESERVED_KEYS",
    "MergedEntry",
    "TranslationDictionary",
]
