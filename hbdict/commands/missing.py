"""Komenda hbdict missing: wpisy słownika bez tłumaczenia w danym języku."""

from __future__ import annotations

import argparse
import json

from rich.console import Console
from rich.markup import escape

from dictionary import DictionaryFormatError, load_dictionary, output_paths
from handbook import SUPPORTED_LANGUAGES
from hbdict import _config
from hbdict.commands.generate import add_path_arguments, entries_table
from merger import missing_entries

console = Console()


def run(args: argparse.Namespace) -> None:
    out_dir = _config.output_dir(args.out_dir, args.handbooks_dir)
    pretty_path, _ = output_paths(out_dir)

    if not pretty_path.exists():
        console.print(f"[red]Plik nie istnieje:[/red] {pretty_path}")
        console.print("[dim]Najpierw uruchom: hbdict generate[/dim]")
        raise SystemExit(1)

    try:
        entries = load_dictionary(pretty_path)
    except (DictionaryFormatError, OSError, json.JSONDecodeError) as e:
        console.print(f"[red]Błąd odczytu słownika:[/red] {escape(str(e))}")
        raise SystemExit(1)

    if args.section:
        entries = [e for e in entries if e.section == args.section]

    missing = missing_entries(entries, args.language)

    if not missing:
        console.print(f"[green]Wszystkie wpisy ({len(entries)}) mają tłumaczenie [bold]{args.language}[/bold].[/green]")
        return

    console.print()
    console.print(entries_table(missing))
    console.print(
        f"  [dim]{len(missing)} z {len(entries)} wpisów bez tłumaczenia {args.language}[/dim]\n"
    )


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "missing",
        help="Listuje wpisy bez tłumaczenia w podanym języku.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Czyta wygenerowany translation_dictionary.json i listuje wpisy,
które nie mają tekstu w podanym języku.

Przykłady:
  hbdict missing ja
  hbdict missing fr --section Items
        """,
    )
    p.add_argument(
        "language",
        metavar="JĘZYK",
        choices=SUPPORTED_LANGUAGES,
        help="Kod języka: " + ", ".join(SUPPORTED_LANGUAGES),
    )
    p.add_argument(
        "--section", "-s",
        metavar="SEKCJA",
        default=None,
        help="Ogranicz do jednej sekcji (dokładna nazwa).",
    )
    add_path_arguments(p)
    p.set_defaults(func=run)
