"""Komenda hbdict generate: budowa słownika tłumaczeń z handbooków."""

from __future__ import annotations

import argparse
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich import box

from data_model import ParsedDocument, SourceDocument, TranslationDictionary
from dictionary import write_dictionary
from handbook import SUPPORTED_LANGUAGES, discover_sources, parse_handbook_file
from hbdict import _config
from merger import language_counts, merge_documents, ordered_union, section_counts

console = Console()


# ---------------------------------------------------------------------------
# Potok: odczyt → parsowanie → scalanie
# ---------------------------------------------------------------------------

def _parse_sources(sources: list[SourceDocument]) -> dict[str, ParsedDocument]:
    documents: dict[str, ParsedDocument] = {}
    for src in sources:
        console.print(f"Przetwarzanie [bold]{src.filename}[/bold] ([cyan]{src.language}[/cyan]) …")
        documents[src.language] = parse_handbook_file(src.path)
    return documents


def build_dictionary(handbooks: Path) -> TranslationDictionary:
    """Czyta rozpoznane handbooki z katalogu i zwraca scalony słownik."""
    sources = [s for s in discover_sources(handbooks) if s.recognized]
    console.print(
        f"Znalezione handbooki ([bold]{len(sources)}[/bold]): "
        + ", ".join(s.filename for s in sources)
    )

    documents = _parse_sources(sources)
    entries = merge_documents(documents)

    sections = ordered_union(doc.keys() for doc in documents.values())
    console.print(
        f"Znalezione sekcje ([bold]{len(sections)}[/bold]): "
        + ", ".join(escape(s) for s in sections)
    )
    console.print(f"Wygenerowano [bold]{len(entries)}[/bold] wpisów słownika.")
    return entries


# ---------------------------------------------------------------------------
# Wyświetlanie w terminalu
# ---------------------------------------------------------------------------

def _show_statistics(entries: TranslationDictionary) -> None:
    console.print(f"\n[bold]Statystyki[/bold]: łącznie wpisów: [bold]{len(entries)}[/bold]")

    sections = Table(box=box.SIMPLE_HEAD, header_style="bold white", expand=False)
    sections.add_column("SEKCJA", style="bold cyan", no_wrap=False, max_width=60)
    sections.add_column("WPISY", justify="right", no_wrap=True)
    for section, n in section_counts(entries).items():
        sections.add_row(escape(section), str(n))
    console.print(sections)

    languages = Table(box=box.SIMPLE_HEAD, header_style="bold white", expand=False)
    languages.add_column("JĘZYK", style="bold", no_wrap=True)
    languages.add_column("WPISY", justify="right", no_wrap=True)
    for lang, n in language_counts(entries, SUPPORTED_LANGUAGES).items():
        languages.add_row(lang, str(n) if n else "[dim]0[/dim]")
    console.print(languages)


def entries_table(entries: TranslationDictionary) -> Table:
    """Tabela wpisów: sekcja, id, języki z tekstem i pierwszy tekst."""
    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("SEKCJA", style="bold cyan", no_wrap=False, max_width=30)
    table.add_column("ID", justify="right", no_wrap=True)
    table.add_column("JĘZYKI", no_wrap=False, max_width=40)
    table.add_column("TEKST", no_wrap=False, max_width=50)

    for entry in entries:
        first_text = next(iter(entry.texts.values()), "")
        table.add_row(
            escape(entry.section),
            entry.id,
            ", ".join(entry.texts),
            escape(first_text[:80]),
        )
    return table


def _show_entries(entries: TranslationDictionary) -> None:
    if not entries:
        console.print("[yellow]Brak wpisów.[/yellow]")
        return

    console.print()
    console.print(entries_table(entries))
    console.print(f"  [dim]{len(entries)} wpisów[/dim]\n")


# ---------------------------------------------------------------------------
# Główna logika komendy
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace) -> None:
    handbooks = _config.handbooks_dir(args.handbooks_dir)
    out_dir = _config.output_dir(args.out_dir, args.handbooks_dir)

    if not handbooks.is_dir():
        console.print(f"[red]Katalog handbooków nie istnieje:[/red] {handbooks}")
        raise SystemExit(1)

    try:
        entries = build_dictionary(handbooks)
    except Exception as e:
        console.print(f"[red]Błąd generowania słownika:[/red] {escape(str(e))}")
        raise SystemExit(1)

    try:
        pretty_path, compact_path = write_dictionary(entries, out_dir)
    except OSError as e:
        console.print(f"[red]Błąd zapisu słownika:[/red] {escape(str(e))}")
        raise SystemExit(1)

    console.print(f"[green]JSON:[/green] {pretty_path}")
    console.print(f"[green]JSON (kompakt):[/green] {compact_path}")

    _show_statistics(entries)

    if args.show:
        _show_entries(entries)


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "generate",
        help="Buduje słownik tłumaczeń z handbooków (domyślna komenda).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Parsuje handbooki handbook_<LANG>.md, scala wpisy po (sekcja, id) i zapisuje:
  translation_dictionary.json            wersja z wcięciami
  translation_dictionary_compact.json    wersja skompresowana

Pliki spoza tabeli języków są pomijane.
Domyślnie wyniki trafiają do katalogu nadrzędnego katalogu handbooków.

Przykłady:
  hbdict
  hbdict generate --handbooks-dir docs/handbooks
  hbdict generate --out-dir dist --show
        """,
    )
    add_path_arguments(p)
    p.add_argument(
        "--show",
        action="store_true",
        help="Wyświetl tabelę wszystkich wpisów po zapisie.",
    )
    p.set_defaults(func=run)


def add_path_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--handbooks-dir",
        metavar="KATALOG",
        default=None,
        help="Katalog z handbookami (domyślnie: $HBDICT_HANDBOOKS_DIR lub ./handbooks).",
    )
    p.add_argument(
        "--out-dir",
        metavar="KATALOG",
        default=None,
        help="Katalog wyjściowy (domyślnie: $HBDICT_OUTPUT_DIR lub katalog nadrzędny handbooków).",
    )
