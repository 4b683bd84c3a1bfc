"""
merger/engine.py: scalanie sparsowanych handbooków w jeden słownik.

Klucz wpisu to para (section, id); id jest unikalne tylko w obrębie sekcji.
Kolejność wyniku jest deterministyczna: dict w Pythonie zachowuje kolejność
wstawiania, więc służy jako zbiór uporządkowany.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from data_model.documents import ParsedDocument
from data_model.entries import RESERVED_KEYS, MergedEntry, TranslationDictionary


def ordered_union(groups: Iterable[Iterable[str]]) -> list[str]:
    """Suma zbiorów w kolejności pierwszego wystąpienia."""
    seen: dict[str, None] = {}
    for group in groups:
        for item in group:
            seen.setdefault(item, None)
    return list(seen)


def _check_language_codes(codes: Iterable[str]) -> None:
    for code in codes:
        if not code or code in RESERVED_KEYS:
            raise ValueError(f"Niedozwolony kod języka: {code!r}")


def merge_documents(documents: Mapping[str, ParsedDocument]) -> TranslationDictionary:
    """
    Scala mapę kod języka → ParsedDocument w listę MergedEntry.

    Sekcje i id są brane z sumy po wszystkich językach (kolejność pierwszego
    wystąpienia, języki w kolejności mapy). Wpis bez żadnego niepustego
    tekstu jest odrzucany. Wejście nie jest modyfikowane.
    """
    _check_language_codes(documents)

    sections = ordered_union(doc.keys() for doc in documents.values())
    result: TranslationDictionary = []

    for section in sections:
        ids = ordered_union(
            doc.get(section, {}).keys() for doc in documents.values()
        )
        for entry_id in ids:
            texts: dict[str, str] = {}
            for lang, doc in documents.items():
                text = doc.get(section, {}).get(entry_id)
                if text:
                    texts[lang] = text
            if texts:
                result.append(MergedEntry(id=entry_id, section=section, texts=texts))

    return result
