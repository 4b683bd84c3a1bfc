"""Tests for path configuration (hbdict._config)."""

from pathlib import Path

import pytest

from hbdict import _config


class TestHandbooksDir:
    def test_default(self) -> None:
        assert _config.handbooks_dir() == Path("handbooks")

    def test_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HBDICT_HANDBOOKS_DIR", "/data/hb")
        assert _config.handbooks_dir() == Path("/data/hb")

    def test_override_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HBDICT_HANDBOOKS_DIR", "/data/hb")
        assert _config.handbooks_dir("other") == Path("other")


class TestOutputDir:
    def test_defaults_to_parent_of_handbooks(self, tmp_path: Path) -> None:
        handbooks = tmp_path / "handbooks"
        assert _config.output_dir(handbooks=handbooks) == tmp_path.resolve()

    def test_environment(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("HBDICT_OUTPUT_DIR", str(tmp_path / "dist"))
        assert _config.output_dir() == tmp_path / "dist"

    def test_override_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HBDICT_OUTPUT_DIR", "/env/out")
        assert _config.output_dir("cli/out") == Path("cli/out")
