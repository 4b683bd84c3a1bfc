"""
dictionary/writer.py: zapis i odczyt plików słownika tłumaczeń.

Dwa artefakty w katalogu wyjściowym:
  translation_dictionary.json            wcięcia 2 spacje (do przeglądania)
  translation_dictionary_compact.json    bez białych znaków

Oba zawierają te same rekordy w tej samej kolejności.
"""

from __future__ import annotations

import json
from pathlib import Path

from data_model.entries import MergedEntry, TranslationDictionary
from .schema import validate_dictionary

DICTIONARY_FILENAME = "translation_dictionary.json"
COMPACT_FILENAME = "translation_dictionary_compact.json"


def output_paths(out_dir: str | Path) -> tuple[Path, Path]:
    out = Path(out_dir)
    return out / DICTIONARY_FILENAME, out / COMPACT_FILENAME


def dump_pretty(entries: TranslationDictionary) -> str:
    return json.dumps([e.to_record() for e in entries], ensure_ascii=False, indent=2)


def dump_compact(entries: TranslationDictionary) -> str:
    return json.dumps(
        [e.to_record() for e in entries], ensure_ascii=False, separators=(",", ":")
    )


def write_dictionary(entries: TranslationDictionary, out_dir: str | Path) -> tuple[Path, Path]:
    """
    Zapisuje obie wersje słownika i zwraca ich ścieżki.

    Obie treści są serializowane przed zapisem pierwszego pliku.
    OSError (np. brak uprawnień) propaguje do wywołującego.
    """
    pretty_path, compact_path = output_paths(out_dir)
    pretty = dump_pretty(entries)
    compact = dump_compact(entries)
    pretty_path.write_text(pretty, encoding="utf-8")
    compact_path.write_text(compact, encoding="utf-8")
    return pretty_path, compact_path


def load_dictionary(path: str | Path) -> TranslationDictionary:
    """Wczytuje plik słownika; rzuca DictionaryFormatError przy złym formacie."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    validate_dictionary(data)
    return [MergedEntry.from_record(r) for r in data]
