"""merger/stats.py: statystyki pokrycia słownika (sekcje, języki, braki)."""

from __future__ import annotations

from collections.abc import Iterable

from data_model.entries import MergedEntry


def section_counts(entries: Iterable[MergedEntry]) -> dict[str, int]:
    counts: dict[str, int] = {}
    for entry in entries:
        counts[entry.section] = counts.get(entry.section, 0) + 1
    return counts


def language_counts(
    entries: Iterable[MergedEntry],
    languages: Iterable[str],
) -> dict[str, int]:
    """
    Liczba wpisów z niepustym tekstem per język.

    Każdy język z `languages` ma wpis (także 0, gdy brak pliku); języki
    spoza tej listy nie są liczone.
    """
    counts: dict[str, int] = {lang: 0 for lang in languages}
    for entry in entries:
        for lang, text in entry.texts.items():
            if text and lang in counts:
                counts[lang] += 1
    return counts


def missing_entries(entries: Iterable[MergedEntry], language: str) -> list[MergedEntry]:
    """Wpisy bez tekstu w danym języku."""
    return [e for e in entries if not e.texts.get(language)]
