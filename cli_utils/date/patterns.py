"""Format-pattern interpreter shared by parsing and rendering.

A pattern is literal text mixed with directives. Each directive maps to one
entry of DIRECTIVES: a regex used when parsing, a reader that turns the
matched text into a field value, and a renderer used when formatting. Adding
a directive means adding a table entry; nothing else changes.

Two dialects:
- strftime: any pattern containing "%" ("%Y-%m-%d", "%A, %B %d %Y").
  "%F" and "%D" expand to "%Y-%m-%d" and "%m/%d/%y"; "%%" is a literal "%".
- compact: no "%" at all ("Y-m-d", "d/m/Y"). Directive letters stand alone;
  a backslash makes the next character literal ("d \\o\\f B").
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable

from ..errors import ParseError
from .calendar import MONTH_NAMES, WEEKDAY_NAMES
from .types import CalendarDate


def _two_digit_year(tok: str) -> int:
    yy = int(tok)
    # Same pivot as chrono: 70-99 -> 1900s, 00-69 -> 2000s.
    return 1900 + yy if yy >= 70 else 2000 + yy


def _name_reader(names: tuple[str, ...], *, width: int | None, base: int) -> Callable[[str], int | None]:
    lookup = {(n[:width] if width else n).lower(): i + base for i, n in enumerate(names)}

    def read(tok: str) -> int | None:
        return lookup.get(tok.lower())

    return read


@dataclass(frozen=True)
class Directive:
    field: str  # "year", "month", "day" or "weekday"
    regex: str
    read: Callable[[str], int | None]
    render: Callable[[CalendarDate], str]


def _names_regex(names: tuple[str, ...], *, width: int | None = None) -> str:
    """Case-insensitive alternation of the actual names, so each match has one length."""
    alts = sorted({(n[:width] if width else n).lower() for n in names}, key=len, reverse=True)
    return "(?i:" + "|".join(alts) + ")"


# Two digits when available, one digit only when no digit follows; never backtracks.
_ONE_OR_TWO_DIGITS = r"(?:[0-9]{2}|[0-9](?![0-9]))"

DIRECTIVES: dict[str, Directive] = {
    "Y": Directive("year", r"[0-9]{4}", int, lambda d: f"{d.year:04d}"),
    "y": Directive("year", r"[0-9]{2}", _two_digit_year, lambda d: f"{d.year % 100:02d}"),
    "m": Directive("month", _ONE_OR_TWO_DIGITS, int, lambda d: f"{d.month:02d}"),
    "d": Directive("day", _ONE_OR_TWO_DIGITS, int, lambda d: f"{d.day:02d}"),
    "B": Directive(
        "month",
        _names_regex(MONTH_NAMES),
        _name_reader(MONTH_NAMES, width=None, base=1),
        lambda d: MONTH_NAMES[d.month - 1],
    ),
    "b": Directive(
        "month",
        _names_regex(MONTH_NAMES, width=3),
        _name_reader(MONTH_NAMES, width=3, base=1),
        lambda d: MONTH_NAMES[d.month - 1][:3],
    ),
    "A": Directive(
        "weekday",
        _names_regex(WEEKDAY_NAMES),
        _name_reader(WEEKDAY_NAMES, width=None, base=0),
        lambda d: d.weekday_name(),
    ),
    "a": Directive(
        "weekday",
        _names_regex(WEEKDAY_NAMES, width=3),
        _name_reader(WEEKDAY_NAMES, width=3, base=0),
        lambda d: d.weekday_name()[:3],
    ),
}

# strftime-only spellings
_STRFTIME_ALIASES = {"h": "b"}
_STRFTIME_COMPOSITES = {"F": "%Y-%m-%d", "D": "%m/%d/%y"}

Segment = tuple[str, str]  # ("lit", text) or ("dir", letter)


def _tokenize_strftime(fmt: str) -> list[Segment]:
    out: list[Segment] = []
    i = 0
    while i < len(fmt):
        ch = fmt[i]
        if ch != "%":
            out.append(("lit", ch))
            i += 1
            continue
        if i + 1 >= len(fmt):
            raise ParseError(f"Pattern ends with a dangling '%': {fmt!r}")
        code = fmt[i + 1]
        i += 2
        if code == "%":
            out.append(("lit", "%"))
        elif code in _STRFTIME_COMPOSITES:
            out.extend(_tokenize_strftime(_STRFTIME_COMPOSITES[code]))
        elif code in DIRECTIVES or code in _STRFTIME_ALIASES:
            out.append(("dir", _STRFTIME_ALIASES.get(code, code)))
        else:
            raise ParseError(f"Unsupported directive %{code} in pattern {fmt!r}")
    return out


def _tokenize_compact(fmt: str) -> list[Segment]:
    out: list[Segment] = []
    i = 0
    while i < len(fmt):
        ch = fmt[i]
        if ch == "\\" and i + 1 < len(fmt):
            out.append(("lit", fmt[i + 1]))
            i += 2
            continue
        out.append(("dir", ch) if ch in DIRECTIVES else ("lit", ch))
        i += 1
    return out


@dataclass(frozen=True)
class CompiledPattern:
    source: str
    segments: tuple[Segment, ...]
    regex: re.Pattern[str]
    groups: tuple[tuple[str, Directive], ...]

    def render(self, d: CalendarDate) -> str:
        parts: list[str] = []
        for kind, val in self.segments:
            parts.append(DIRECTIVES[val].render(d) if kind == "dir" else val)
        return "".join(parts)

    def parse(self, text: str) -> CalendarDate:
        m = self.regex.fullmatch(text)
        if not m:
            raise ParseError(f"{text!r} does not match pattern {self.source!r}")

        fields: dict[str, int] = {}
        for group, directive in self.groups:
            tok = m.group(group)
            value = directive.read(tok)
            if value is None:
                raise ParseError(f"Unrecognized {directive.field} {tok!r} in {text!r}")
            prev = fields.setdefault(directive.field, value)
            if prev != value:
                raise ParseError(f"Conflicting {directive.field} values in {text!r}")

        missing = [f for f in ("year", "month", "day") if f not in fields]
        if missing:
            raise ParseError(f"Pattern {self.source!r} does not determine the {'/'.join(missing)}")

        d = CalendarDate(fields["year"], fields["month"], fields["day"])
        wd = fields.get("weekday")
        if wd is not None and wd != d.weekday():
            raise ParseError(f"{text!r}: {WEEKDAY_NAMES[wd]} does not match {d} ({d.weekday_name()})")
        return d


def compile_pattern(fmt: str) -> CompiledPattern:
    if not isinstance(fmt, str):
        raise ParseError(f"Pattern must be a string, got {type(fmt).__name__}")
    return _compile(fmt)


@lru_cache(maxsize=128)
def _compile(fmt: str) -> CompiledPattern:
    raw = _tokenize_strftime(fmt) if "%" in fmt else _tokenize_compact(fmt)

    # Merge adjacent literals so the regex and render loop stay short.
    segments: list[Segment] = []
    for kind, val in raw:
        if kind == "lit" and segments and segments[-1][0] == "lit":
            segments[-1] = ("lit", segments[-1][1] + val)
        else:
            segments.append((kind, val))

    regex_parts: list[str] = []
    groups: list[tuple[str, Directive]] = []
    for kind, val in segments:
        if kind == "lit":
            regex_parts.append(re.escape(val))
            continue
        name = f"g{len(groups)}"
        directive = DIRECTIVES[val]
        regex_parts.append(f"(?P<{name}>{directive.regex})")
        groups.append((name, directive))

    return CompiledPattern(
        source=fmt,
        segments=tuple(segments),
        regex=re.compile("".join(regex_parts)),
        groups=tuple(groups),
    )
