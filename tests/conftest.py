"""
Shared pytest fixtures for hbdict tests.

Provides a factory for writing handbook files into a temporary directory
and a ready-made handbooks directory with three languages plus files the
language table does not recognize.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

EN_HANDBOOK = """# Handbook

Intro text that is not an entry.

## Items
ID:1 Name:Sword<br>Sharp.
ID:2 Name:Shield<br>
ID:3 Name:Potion<br>

## Skills
ID:10 Name:Slash<br>
"""

FR_HANDBOOK = """## Items
ID:1 Name:Épée<br>
ID:3 Name:Potion<br>

## Skills
ID:10 Name:Taillade<br>
ID:11 Name:Parade<br>
"""

JP_HANDBOOK = """## Items
ID:1 Name:剣<br>

## Quests
ID:5 Name:始まり<br>
"""


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure path configuration never leaks in from the developer's shell."""
    monkeypatch.delenv("HBDICT_HANDBOOKS_DIR", raising=False)
    monkeypatch.delenv("HBDICT_OUTPUT_DIR", raising=False)


@pytest.fixture
def write_handbook(tmp_path: Path) -> Callable[[str, str], Path]:
    """Factory writing a handbook file into tmp_path/handbooks."""
    directory = tmp_path / "handbooks"
    directory.mkdir(exist_ok=True)

    def _write(filename: str, content: str) -> Path:
        path = directory / filename
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def handbooks_dir(write_handbook: Callable[[str, str], Path]) -> Path:
    """Handbooks directory with en/fr/ja sources and two unrecognized files."""
    write_handbook("handbook_EN.md", EN_HANDBOOK)
    write_handbook("handbook_FR.md", FR_HANDBOOK)
    write_handbook("handbook_JP.md", JP_HANDBOOK)
    write_handbook("handbook_XX.md", "## Items\nID:1 Name:Ghost<br>\n")
    path = write_handbook("notes.md", "## Items\nID:99 Name:Note<br>\n")
    return path.parent
