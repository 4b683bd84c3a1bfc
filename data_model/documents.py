"""
data_model/documents.py: model dokumentów źródłowych (handbooków).

SourceDocument odpowiada jednemu plikowi handbook_<LANG>.md; ParsedDocument
to wynik jego parsowania: sekcja → (id wpisu → tekst wyświetlany).
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class SourceDocument:
    path: Path
    language: str | None   # kod języka lub None gdy nazwa pliku nieznana

    @property
    def filename(self) -> str:
        return self.path.name

    @property
    def recognized(self) -> bool:
        return self.language is not None


# sekcja (dosłowny tekst nagłówka "## ") → id wpisu → tekst
ParsedDocument: TypeAlias = dict[str, dict[str, str]]
