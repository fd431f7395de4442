from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .date.ops import DEFAULT_FORMAT
from .date.patterns import compile_pattern
from .errors import ParseError


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the demo menu."""

    date_format: str = DEFAULT_FORMAT
    demo_dir: Path = Path(tempfile.gettempdir())

    def __post_init__(self) -> None:
        try:
            compile_pattern(self.date_format)
        except ParseError as e:
            raise ValueError(f"Invalid date format {self.date_format!r}: {e}") from e

    @classmethod
    def from_env(cls, *, date_format: str | None = None, demo_dir: Path | None = None) -> "Settings":
        """Build settings from CLI_UTILS_* env vars (and .env); explicit arguments win."""
        load_dotenv()
        fmt = date_format or os.environ.get("CLI_UTILS_DATE_FORMAT", "").strip() or DEFAULT_FORMAT
        env_dir = os.environ.get("CLI_UTILS_DEMO_DIR", "").strip()
        d = demo_dir or (Path(env_dir).expanduser() if env_dir else Path(tempfile.gettempdir()))
        return cls(date_format=fmt, demo_dir=d)
