from __future__ import annotations


def is_palindrome(s: str) -> bool:
    """Case-insensitive palindrome check that ignores non-alphanumerics."""
    norm = [c.lower() for c in s if c.isalnum()]
    return norm == norm[::-1]


def count_char(s: str, target: str) -> int:
    if len(target) != 1:
        raise ValueError(f"target must be a single character, got {target!r}")
    return s.count(target)


def reverse_string(s: str) -> str:
    return s[::-1]


def to_title_case(s: str) -> str:
    """Capitalize each whitespace-separated word; words are re-joined by single spaces."""
    return " ".join(w[:1].upper() + w[1:].lower() for w in s.split())


def remove_whitespace(s: str) -> str:
    return "".join(c for c in s if not c.isspace())


def word_count(s: str) -> int:
    return len(s.split())


def is_alphabetic(s: str) -> bool:
    # str.isalpha() is already False for ""
    return s.isalpha()
