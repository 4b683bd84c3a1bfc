"""Tests for handbook line extraction (handbook.parser)."""

from pathlib import Path

import pytest

from handbook.parser import parse_handbook_file, parse_handbook_text


class TestParseHandbookText:
    """Section and entry extraction from handbook text."""

    def test_sections_and_entries(self) -> None:
        content = "## Items\nID:1 Name:Sword<br>\nID:2 Name:Shield<br>\n## Skills\nID:7 Name:Slash<br>\n"
        assert parse_handbook_text(content) == {
            "Items": {"1": "Sword", "2": "Shield"},
            "Skills": {"7": "Slash"},
        }

    def test_name_stops_before_first_angle_bracket(self) -> None:
        result = parse_handbook_text("## S\nID:4 Name:Fire Ball<br>desc <b>x</b>\n")
        assert result == {"S": {"4": "Fire Ball"}}

    def test_name_is_not_trimmed(self) -> None:
        result = parse_handbook_text("## S\nID:4 Name: Spaced  <br>\n")
        assert result["S"]["4"] == " Spaced  "

    def test_name_without_markup_runs_to_end_of_line(self) -> None:
        result = parse_handbook_text("## S\nID:4 Name:Plain text")
        assert result["S"]["4"] == "Plain text"

    def test_section_name_taken_verbatim(self) -> None:
        result = parse_handbook_text("##  Odd [Name] \nID:1 Name:x<br>\n")
        assert list(result) == [" Odd [Name] "]

    def test_entry_before_any_heading_is_dropped(self) -> None:
        result = parse_handbook_text("ID:1 Name:Orphan<br>\n## Items\nID:2 Name:Kept<br>\n")
        assert result == {"Items": {"2": "Kept"}}

    def test_only_entries_before_heading_gives_empty_result(self) -> None:
        assert parse_handbook_text("ID:1 Name:Orphan<br>\nID:2 Name:Other<br>\n") == {}

    def test_repeated_heading_resets_section(self) -> None:
        content = "## Greetings\nID:1 Name:Hello<br>\n## Greetings\nID:2 Name:Bye<br>\n"
        assert parse_handbook_text(content) == {"Greetings": {"2": "Bye"}}

    def test_duplicate_id_last_wins(self) -> None:
        content = "## S\nID:1 Name:First<br>\nID:1 Name:Second<br>\n"
        assert parse_handbook_text(content) == {"S": {"1": "Second"}}

    @pytest.mark.parametrize(
        "line",
        [
            "ID:abc Name:NoDigits<br>",
            "ID:1 Title:Wrong<br>",
            "ID:1  Name:TwoSpaces<br>",
            "ID:1\tName:Tab<br>",
            "ID:1 Name:<br>",
            " ID:1 Name:Indented<br>",
            "id:1 Name:Lowercase<br>",
        ],
    )
    def test_malformed_entry_lines_are_skipped(self, line: str) -> None:
        assert parse_handbook_text(f"## S\n{line}\n") == {"S": {}}

    def test_heading_requires_exact_marker(self) -> None:
        content = "### Sub\nID:1 Name:x<br>\n#Items\nID:2 Name:y<br>\n"
        assert parse_handbook_text(content) == {}

    def test_other_lines_ignored(self) -> None:
        content = "# Title\n\nSome text ID:9 Name:inline\n## S\n- bullet\nID:1 Name:x<br>\n"
        assert parse_handbook_text(content) == {"S": {"1": "x"}}

    def test_empty_heading_does_not_collect_entries(self) -> None:
        assert parse_handbook_text("## \nID:1 Name:x<br>\n") == {"": {}}


class TestParseHandbookFile:
    """Reading handbooks from disk."""

    def test_reads_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "handbook_JP.md"
        path.write_text("## アイテム\nID:1 Name:剣<br>\n", encoding="utf-8")
        assert parse_handbook_file(path) == {"アイテム": {"1": "剣"}}

    def test_missing_file_propagates(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            parse_handbook_file(tmp_path / "missing.md")

    def test_invalid_encoding_propagates(self, tmp_path: Path) -> None:
        path = tmp_path / "handbook_EN.md"
        path.write_bytes(b"## S\nID:1 Name:\xff\xfe<br>\n")
        with pytest.raises(UnicodeDecodeError):
            parse_handbook_file(path)
