"""Konfiguracja ścieżek: zmienne środowiskowe (opcjonalnie z pliku .env)."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(Path.cwd() / ".env")

DEFAULT_HANDBOOKS_DIR = "handbooks"


def handbooks_dir(override: str | Path | None = None) -> Path:
    """Katalog z handbook_<LANG>.md: flaga CLI > HBDICT_HANDBOOKS_DIR > ./handbooks."""
    if override:
        return Path(override)
    return Path(os.getenv("HBDICT_HANDBOOKS_DIR", DEFAULT_HANDBOOKS_DIR))


def output_dir(
    override: str | Path | None = None,
    handbooks: str | Path | None = None,
) -> Path:
    """Katalog wyjściowy: flaga CLI > HBDICT_OUTPUT_DIR > katalog nadrzędny handbooków."""
    if override:
        return Path(override)
    env = os.getenv("HBDICT_OUTPUT_DIR")
    if env:
        return Path(env)
    return handbooks_dir(handbooks).resolve().parent
