"""
handbook/languages.py: rozpoznawanie języka handbooka po nazwie pliku.

Tabela jest zamknięta: pliki spoza niej są pomijane bez błędu.
Dopasowanie dokładne (z rozróżnieniem wielkości liter).
"""

from __future__ import annotations

from pathlib import Path

from data_model.documents import SourceDocument

# Indonezyjski ma kod "in" (jak w lokalach Javy/Androida), bo "id" jest
# kluczem rekordu słownika.
LANGUAGE_MAP: dict[str, str] = {
    "handbook_EN.md":  "en",
    "handbook_JP.md":  "ja",
    "handbook_CHS.md": "zhCN",
    "handbook_CHT.md": "zhTW",
    "handbook_DE.md":  "de",
    "handbook_ES.md":  "es",
    "handbook_FR.md":  "fr",
    "handbook_ID.md":  "in",
    "handbook_KR.md":  "ko",
    "handbook_PT.md":  "pt",
    "handbook_RU.md":  "ru",
    "handbook_TH.md":  "th",
    "handbook_VI.md":  "vi",
}

SUPPORTED_LANGUAGES: tuple[str, ...] = tuple(LANGUAGE_MAP.values())

HANDBOOK_SUFFIX = ".md"


def resolve_language(filename: str) -> str | None:
    """Zwraca kod języka dla nazwy pliku albo None gdy plik nie jest w tabeli."""
    return LANGUAGE_MAP.get(filename)


def discover_sources(directory: str | Path) -> list[SourceDocument]:
    """
    Zwraca wszystkie pliki *.md z katalogu (bez rekursji), posortowane po
    nazwie. Pliki nierozpoznane mają language=None i nie są parsowane;
    odfiltrowuje je wywołujący.
    """
    root = Path(directory)
    paths = sorted(
        (p for p in root.iterdir() if p.is_file() and p.suffix == HANDBOOK_SUFFIX),
        key=lambda p: p.name,
    )
    return [SourceDocument(path=p, language=resolve_language(p.name)) for p in paths]
