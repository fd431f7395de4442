from __future__ import annotations

import pytest

from cli_utils.string_utils import (
    count_char,
    is_alphabetic,
    is_palindrome,
    remove_whitespace,
    reverse_string,
    to_title_case,
    word_count,
)


def test_is_palindrome() -> None:
    assert is_palindrome("racecar")
    assert not is_palindrome("hello")
    assert is_palindrome("A man a plan a canal Panama")
    assert not is_palindrome("race a car")
    assert is_palindrome("")
    assert is_palindrome("a")


def test_count_char() -> None:
    assert count_char("hello world", "l") == 3
    assert count_char("rust programming", "r") == 3
    assert count_char("hello", "x") == 0
    assert count_char("", "a") == 0
    with pytest.raises(ValueError):
        count_char("hello", "ll")


def test_reverse_string() -> None:
    assert reverse_string("hello") == "olleh"
    assert reverse_string("") == ""
    assert reverse_string("a") == "a"


def test_to_title_case() -> None:
    assert to_title_case("hello world") == "Hello World"
    assert to_title_case("HELLO WORLD") == "Hello World"
    assert to_title_case("  rust   programming ") == "Rust Programming"
    assert to_title_case("") == ""


def test_remove_whitespace_and_word_count() -> None:
    assert remove_whitespace("  rust  programming  ") == "rustprogramming"
    assert remove_whitespace("   ") == ""
    assert word_count("  rust  programming  language  ") == 3
    assert word_count("") == 0
    assert word_count("single") == 1


def test_is_alphabetic() -> None:
    assert is_alphabetic("hello")
    assert is_alphabetic("HelloWorld")
    assert not is_alphabetic("hello123")
    assert not is_alphabetic("hello world")
    assert not is_alphabetic("")
