"""
dictionary: artefakty słownika tłumaczeń (JSON pełny + kompaktowy).

Publiczne API:
  write_dictionary(entries, out_dir) → (ścieżka pełna, ścieżka kompaktowa)
  load_dictionary(path)              → TranslationDictionary
  dump_pretty / dump_compact         → str
  output_paths(out_dir)
  DICTIONARY_SCHEMA, DictionaryFormatError, schema_errors, validate_dictionary
"""

from .schema import (
    DICTIONARY_SCHEMA,
    DictionaryFormatError,
    schema_errors,
    validate_dictionary,
)
from .writer import (
    COMPACT_FILENAME,
    DICTIONARY_FILENAME,
    dump_compact,
    dump_pretty,
    load_dictionary,
    output_paths,
    write_dictionary,
)

__all__ = [
    "DICTIONARY_SCHEMA",
    "DictionaryFormatError",
    "schema_errors",
    "validate_dictionary",
    "COMPACT_FILENAME",
    "DICTIONARY_FILENAME",
    "dump_compact",
    "dump_pretty",
    "load_dictionary",
    "output_paths",
    "write_dictionary",
]
