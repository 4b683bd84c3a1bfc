"""
handbook/parser.py: ekstrakcja wpisów ID/Name z handbooka markdown.

Architektura:
  tekst → linie ("\n") → nagłówki "## " (sekcje) + linie "ID:<cyfry> Name:<tekst>"
  → ParsedDocument (sekcja → id → nazwa)

To nie jest parser markdown: liczą się tylko dwa rodzaje linii, reszta jest
ignorowana. Błędnie sformatowane linie ID są pomijane bez błędu.

Kluczowe funkcje publiczne:
  parse_handbook_text(content) -> ParsedDocument
  parse_handbook_file(path)    -> ParsedDocument
"""

from __future__ import annotations

import re
from pathlib import Path

from data_model.documents import ParsedDocument

# ---------------------------------------------------------------------------
# Wzorce linii
# ---------------------------------------------------------------------------

SECTION_MARKER = "## "
ENTRY_PREFIX = "ID:"
NAME_MARKER = " Name:"

# Nazwa kończy się przed pierwszym "<" (zwykle "<br>"); bez przycinania spacji.
# Dokładnie jedna spacja przed "Name:", tabulator ani kilka spacji nie pasują.
ENTRY_RE = re.compile(r"ID:(\d+) Name:([^<]+)")


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def parse_handbook_text(content: str) -> ParsedDocument:
    """
    Parsuje treść handbooka do mapy sekcja → (id → nazwa).

    - Powtórzony nagłówek sekcji czyści jej dotychczasowe wpisy
      (w obrębie dokumentu wygrywa ostatnie wystąpienie nagłówka).
    - Linia ID przed pierwszym nagłówkiem jest pomijana.
    - Powtórzone id w tej samej sekcji: wygrywa ostatnie.
    """
    data: ParsedDocument = {}
    current_section = ""

    for line in content.split("\n"):
        if line.startswith(SECTION_MARKER):
            current_section = line[len(SECTION_MARKER):]
            data[current_section] = {}
        elif line.startswith(ENTRY_PREFIX) and NAME_MARKER in line:
            m = ENTRY_RE.search(line)
            if m and current_section:
                data[current_section][m.group(1)] = m.group(2)

    return data


def parse_handbook_file(path: str | Path) -> ParsedDocument:
    """Wczytuje plik (UTF-8) i parsuje go. Błędy I/O propagują do wywołującego."""
    return parse_handbook_text(Path(path).read_text(encoding="utf-8"))
