"""Entry point for the `cli-utils` console script.

Usage:
  cli-utils
  cli-utils --date-format "%d/%m/%Y" --demo-dir /tmp/cli-utils

Settings come from CLI_UTILS_DATE_FORMAT / CLI_UTILS_DEMO_DIR (or a .env file);
flags take precedence.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from .config import Settings
from .menu import Menu


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(prog="cli-utils", description="Math, string, date and file utilities demo menu.")
    ap.add_argument("--date-format", default=None, help='Pattern for dates in the demo (e.g. "%%Y-%%m-%%d" or "d/m/Y").')
    ap.add_argument("--demo-dir", type=Path, default=None, help="Directory used by the file I/O demo.")
    args = ap.parse_args(argv)

    try:
        settings = Settings.from_env(date_format=args.date_format, demo_dir=args.demo_dir)
    except ValueError as e:
        raise SystemExit(str(e))

    try:
        Menu(settings=settings).run()
    except KeyboardInterrupt:
        print()


if __name__ == "__main__":
    main()
