"""Thin file helpers over pathlib/shutil.

Text is UTF-8 and written/read without newline translation, so
read_file(p) returns exactly what write_file(p, s) stored. Filesystem failures
propagate as OSError (FileNotFoundError, PermissionError, IsADirectoryError, ...).
"""

from __future__ import annotations

import os
import shutil
from itertools import islice
from pathlib import Path
from typing import Iterable

PathLike = str | os.PathLike[str]


def read_file(path: PathLike) -> str:
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


def write_file(path: PathLike, content: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)


def append_file(path: PathLike, content: str) -> None:
    with open(path, "a", encoding="utf-8", newline="") as f:
        f.write(content)


def read_lines(path: PathLike) -> list[str]:
    """All lines without their terminators ("\\n" or "\\r\\n")."""
    with open(path, encoding="utf-8", newline="\n") as f:
        return [_strip_eol(ln) for ln in f]


def read_first_n_lines(path: PathLike, n: int) -> list[str]:
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")
    with open(path, encoding="utf-8", newline="\n") as f:
        return [_strip_eol(ln) for ln in islice(f, n)]


def write_lines(path: PathLike, lines: Iterable[str]) -> None:
    write_file(path, "\n".join(lines))


def _strip_eol(line: str) -> str:
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


def file_exists(path: PathLike) -> bool:
    """True only for existing regular files."""
    try:
        return Path(path).is_file()
    except (OSError, ValueError):
        return False


def file_size(path: PathLike) -> int:
    return Path(path).stat().st_size


def create_dir_all(path: PathLike) -> None:
    Path(path).mkdir(parents=True, exist_ok=True)


def copy_file(source: PathLike, destination: PathLike) -> int:
    """Copy contents and permission bits; return the number of bytes copied."""
    shutil.copyfile(source, destination)
    shutil.copymode(source, destination)
    return Path(destination).stat().st_size


def delete_file(path: PathLike) -> None:
    Path(path).unlink()
