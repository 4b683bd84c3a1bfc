"""
data_model/entries.py: scalone wpisy słownika tłumaczeń.

Format rekordu w plikach wyjściowych:
  {"id": "12", "section": "Items", "en": "Sword", "ja": "剣", ...}

Pola językowe występują tylko dla języków, które dostarczyły niepusty tekst;
brakujący język jest pomijany (nigdy null ani "").
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, TypeAlias

# Klucze rekordu zarezerwowane: kod języka nie może ich przesłonić.
RESERVED_KEYS: frozenset[str] = frozenset({"id", "section"})


@dataclass(frozen=True, slots=True)
class MergedEntry:
    """
    Jeden wpis (section, id) z tekstami we wszystkich językach, które go mają.

    - id:      identyfikator wpisu (cyfry, ale trzymany jako str);
               unikalny tylko w obrębie sekcji
    - section: nazwa sekcji z nagłówka "## "
    - texts:   kod języka → tekst, w kolejności scalania języków
    """
    id: str
    section: str
    texts: dict[str, str] = field(default_factory=dict)

    @property
    def key(self) -> tuple[str, str]:
        return (self.section, self.id)

    def to_record(self) -> dict[str, str]:
        record = {"id": self.id, "section": self.section}
        record.update(self.texts)
        return record

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> MergedEntry:
        texts = {
            k: str(v) for k, v in record.items()
            if k not in RESERVED_KEYS
        }
        return cls(id=str(record["id"]), section=str(record["section"]), texts=texts)


# Słownik w kolejności: sekcje wg pierwszego wystąpienia, potem id.
TranslationDictionary: TypeAlias = list[MergedEntry]
