from __future__ import annotations

from pathlib import Path

import pytest

from cli_utils.config import Settings
from cli_utils.date.ops import DEFAULT_FORMAT


def test_from_env_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CLI_UTILS_DATE_FORMAT", raising=False)
    monkeypatch.delenv("CLI_UTILS_DEMO_DIR", raising=False)
    s = Settings.from_env()
    assert s.date_format == DEFAULT_FORMAT
    assert isinstance(s.demo_dir, Path)


def test_from_env_reads_variables(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("CLI_UTILS_DATE_FORMAT", "d/m/Y")
    monkeypatch.setenv("CLI_UTILS_DEMO_DIR", str(tmp_path))
    s = Settings.from_env()
    assert s.date_format == "d/m/Y"
    assert s.demo_dir == tmp_path


def test_explicit_arguments_win(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("CLI_UTILS_DATE_FORMAT", "d/m/Y")
    s = Settings.from_env(date_format="%B %d, %Y", demo_dir=tmp_path / "demo")
    assert s.date_format == "%B %d, %Y"
    assert s.demo_dir == tmp_path / "demo"


def test_invalid_date_format_is_rejected() -> None:
    with pytest.raises(ValueError, match="Invalid date format"):
        Settings(date_format="%Q")
