"""
dictionary/schema.py: schemat JSON plików słownika i jego walidacja.

Plik słownika to tablica rekordów:
  [{"id": "1", "section": "Greetings", "en": "Hello", "fr": "Bonjour"}, ...]
"""

from __future__ import annotations

from typing import Any

import jsonschema

DICTIONARY_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "array",
    "items": {
        "type": "object",
        "required": ["id", "section"],
        "properties": {
            "id":      {"type": "string", "pattern": "^[0-9]+$"},
            "section": {"type": "string"},
        },
        # pola językowe: zawsze niepusty tekst (brak języka = brak pola)
        "additionalProperties": {"type": "string", "minLength": 1},
    },
}


class DictionaryFormatError(ValueError):
    """Plik słownika nie spełnia DICTIONARY_SCHEMA."""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path
        self.message = message


def schema_errors(data: Any) -> list[DictionaryFormatError]:
    """Zwraca wszystkie naruszenia schematu (ścieżka jako JSON Pointer)."""
    validator = jsonschema.Draft202012Validator(DICTIONARY_SCHEMA)
    errors: list[DictionaryFormatError] = []
    for e in validator.iter_errors(data):
        path = (
            "/" + "/".join(str(p) for p in e.absolute_path)
            if e.absolute_path
            else "/"
        )
        errors.append(DictionaryFormatError(path, e.message))
    return errors


def validate_dictionary(data: Any) -> None:
    """Rzuca DictionaryFormatError dla pierwszego naruszenia schematu."""
    errors = schema_errors(data)
    if errors:
        raise errors[0]
