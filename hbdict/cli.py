"""
hbdict: słownik tłumaczeń z handbooków językowych.

Użycie:
  hbdict [<komenda>] [opcje]

Bez komendy uruchamia `generate`.

Komendy:
  generate  Parsuje handbooki i zapisuje słownik (JSON pełny + kompaktowy).
  check     Waliduje wygenerowane pliki i sprawdza ich równoważność.
  missing   Listuje wpisy bez tłumaczenia w podanym języku.
"""

from __future__ import annotations

import argparse
import sys

# Windows: terminal może używać cp1252, więc wymuszamy UTF-8, żeby teksty
# handbooków (CJK, cyrylica, tajski) były wypisywane poprawnie.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from hbdict.commands import generate as cmd_generate
from hbdict.commands import check as cmd_check
from hbdict.commands import missing as cmd_missing

__version__ = "0.1.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hbdict",
        description="hbdict: słownik tłumaczeń z handbooków.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"hbdict {__version__}"
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )

    cmd_generate.add_parser(subparsers)
    cmd_check.add_parser(subparsers)
    cmd_missing.add_parser(subparsers)

    # bez komendy → generate z domyślną konfiguracją
    parser.set_defaults(
        func=cmd_generate.run,
        handbooks_dir=None,
        out_dir=None,
        show=False,
    )

    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()
    args.func(args)


if __name__ == "__main__":
    main()
