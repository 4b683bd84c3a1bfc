"""
handbook: odczyt handbooków językowych (handbook_<LANG>.md).

Publiczne API:
  discover_sources(directory)   → list[SourceDocument]
  resolve_language(filename)    → kod języka | None
  parse_handbook_text(content)  → ParsedDocument
  parse_handbook_file(path)     → ParsedDocument
  LANGUAGE_MAP, SUPPORTED_LANGUAGES
"""

from .languages import (
    LANGUAGE_MAP,
    SUPPORTED_LANGUAGES,
    discover_sources,
    resolve_language,
)
from .parser import parse_handbook_file, parse_handbook_text

__all__ = [
    "LANGUAGE_MAP",
    "SUPPORTED_LANGUAGES",
    "discover_sources",
    "resolve_language",
    "parse_handbook_file",
    "parse_handbook_text",
]
