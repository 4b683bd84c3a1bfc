"""Komenda hbdict check: weryfikacja wygenerowanych plików słownika."""

from __future__ import annotations

import argparse
import json
from collections import Counter

from rich.console import Console
from rich.markup import escape

from data_model import TranslationDictionary
from dictionary import DictionaryFormatError, load_dictionary, output_paths
from hbdict import _config
from hbdict.commands.generate import add_path_arguments

console = Console()


def _fingerprints(entries: TranslationDictionary) -> Counter[str]:
    return Counter(json.dumps(e.to_record(), ensure_ascii=False, sort_keys=True) for e in entries)


def find_duplicates(entries: TranslationDictionary) -> list[tuple[str, str]]:
    """Klucze (section, id) występujące więcej niż raz."""
    counts = Counter(e.key for e in entries)
    return [k for k, n in counts.items() if n > 1]


def run(args: argparse.Namespace) -> None:
    out_dir = _config.output_dir(args.out_dir, args.handbooks_dir)
    pretty_path, compact_path = output_paths(out_dir)

    loaded: list[TranslationDictionary] = []
    for path in (pretty_path, compact_path):
        if not path.exists():
            console.print(f"[red]Plik nie istnieje:[/red] {path}")
            raise SystemExit(1)
        try:
            loaded.append(load_dictionary(path))
        except DictionaryFormatError as e:
            console.print(f"[red]Niepoprawny format[/red] {path}: {escape(str(e))}")
            raise SystemExit(1)
        except (OSError, json.JSONDecodeError) as e:
            console.print(f"[red]Błąd odczytu[/red] {path}: {escape(str(e))}")
            raise SystemExit(1)

    pretty, compact = loaded
    console.print(f"{pretty_path.name}: [bold]{len(pretty)}[/bold] wpisów")
    console.print(f"{compact_path.name}: [bold]{len(compact)}[/bold] wpisów")

    ok = True

    if _fingerprints(pretty) != _fingerprints(compact):
        console.print("[red]Wersja pełna i kompaktowa zawierają różne wpisy.[/red]")
        ok = False

    duplicates = find_duplicates(pretty)
    if duplicates:
        ok = False
        console.print(f"[red]Zduplikowane klucze (sekcja, id): {len(duplicates)}[/red]")
        for section, entry_id in duplicates:
            console.print(f"  {escape(section)} / {entry_id}")

    if not ok:
        raise SystemExit(1)

    console.print("[green]OK[/green]: oba pliki są poprawne i równoważne.")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "check",
        help="Sprawdza format i równoważność plików słownika.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Wczytuje translation_dictionary.json i translation_dictionary_compact.json,
waliduje je schematem JSON i sprawdza, że:
  - obie wersje zawierają te same wpisy,
  - każda para (sekcja, id) występuje dokładnie raz.

Kod wyjścia 1 przy dowolnej niezgodności.

Przykłady:
  hbdict check
  hbdict check --out-dir dist
        """,
    )
    add_path_arguments(p)
    p.set_defaults(func=run)
