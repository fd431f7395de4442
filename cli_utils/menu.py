"""Interactive demo menu.

Main menu:
  1. Math Utils Demo
  2. String Utils Demo
  3. Date Utils Demo
  4. File I/O Utils Demo
  5. Interactive Mode
  6. Exit

Interactive mode commands (space-separated):
  factorial <n> | prime <n> | palindrome <text> | reverse <text>
  weekday <YYYY-MM-DD> | leap <year> | exit

End of input behaves like "6" in the main menu and "exit" in interactive mode.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Callable, TextIO

from . import file_io, math_utils, string_utils
from .config import Settings
from .date import ops as date_ops
from .errors import ParseError


@dataclass
class Menu:
    inp: TextIO = field(default_factory=lambda: sys.stdin)
    out: TextIO = field(default_factory=lambda: sys.stdout)
    err: TextIO = field(default_factory=lambda: sys.stderr)
    settings: Settings = field(default_factory=Settings)

    def say(self, text: str = "") -> None:
        print(text, file=self.out)

    def ask(self, prompt: str) -> str | None:
        """Print prompt without newline and read one line; None on end of input."""
        print(prompt, end="", file=self.out, flush=True)
        line = self.inp.readline()
        if not line:
            return None
        return line.strip()

    def run(self) -> None:
        self.say("Welcome to CLI Utils!")
        self.say("This is a utility library with math, string, date, and file operations.")
        self.say()

        actions: dict[str, Callable[[], None]] = {
            "1": self.math_demo,
            "2": self.string_demo,
            "3": self.date_demo,
            "4": self.file_demo,
            "5": self.interactive_mode,
        }

        while True:
            self.say("Choose an option:")
            self.say("1. Math Utils Demo")
            self.say("2. String Utils Demo")
            self.say("3. Date Utils Demo")
            self.say("4. File I/O Utils Demo")
            self.say("5. Interactive Mode")
            self.say("6. Exit")
            self.say()
            choice = self.ask("Enter your choice (1-6): ")
            if choice is None or choice == "6":
                self.say("Goodbye!")
                return

            action = actions.get(choice)
            if action is None:
                self.say("Invalid choice. Please enter 1-6.")
            else:
                try:
                    action()
                except (ParseError, OSError) as e:
                    print(f"ERROR: {e}", file=self.err)
            self.say()

    def math_demo(self) -> None:
        self.say("=== Math Utils Demo ===")
        self.say(f"Factorial of 5: {math_utils.factorial(5)}")
        self.say(f"GCD of 48 and 18: {math_utils.gcd(48, 18)}")
        self.say(f"Is 17 prime? {_bool_text(math_utils.is_prime(17))}")
        self.say(f"LCM of 4 and 6: {math_utils.lcm(4, 6)}")

    def string_demo(self) -> None:
        self.say("=== String Utils Demo ===")
        s = "racecar"
        self.say(f"Is '{s}' a palindrome? {_bool_text(string_utils.is_palindrome(s))}")
        self.say(f"Count of 'l' in 'hello world': {string_utils.count_char('hello world', 'l')}")
        self.say(f"Reverse of 'hello': {string_utils.reverse_string('hello')}")
        self.say(f"Title case of 'hello world': {string_utils.to_title_case('hello world')}")

    def date_demo(self) -> None:
        self.say("=== Date Utils Demo ===")
        self.say(f"Current date: {date_ops.current_date(self.settings.date_format)}")
        diff = date_ops.difference_in_days("2023-01-10", "2023-01-05")
        self.say(f"Days between 2023-01-10 and 2023-01-05: {diff}")
        self.say(f"Convert '2023-12-25' to DD/MM/YYYY: {date_ops.to_dd_mm_yyyy('2023-12-25')}")
        self.say(f"Is 2024 a leap year? {_bool_text(date_ops.is_leap_year(2024))}")

    def file_demo(self) -> None:
        self.say("=== File I/O Utils Demo ===")
        file_io.create_dir_all(self.settings.demo_dir)
        path = self.settings.demo_dir / "cli_utils_demo.txt"
        file_io.write_file(path, "Hello from CLI Utils!\nThis is a demo file.")
        try:
            self.say(f"OK: created demo file: {path}")
            first = (file_io.read_first_n_lines(path, 1) or [""])[0]
            self.say(f"File content: {first}")
            self.say(f"File size: {file_io.file_size(path)} bytes")
        finally:
            file_io.delete_file(path)
        self.say("OK: cleaned up demo file")

    def interactive_mode(self) -> None:
        self.say("=== Interactive Mode ===")
        self.say("Type 'exit' to return to main menu")

        while True:
            self.say()
            self.say("Choose operation:")
            self.say("- factorial <number>")
            self.say("- prime <number>")
            self.say("- palindrome <text>")
            self.say("- reverse <text>")
            self.say("- weekday <YYYY-MM-DD>")
            self.say("- leap <year>")
            self.say("- exit")
            line = self.ask("> ")
            if line is None:
                return
            parts = line.split()
            if not parts:
                continue
            if parts[0] == "exit":
                return
            self.say(self.dispatch(parts[0], parts[1:]))

    def dispatch(self, cmd: str, args: list[str]) -> str:
        """Run one interactive-mode command and return the text to show."""
        if cmd == "factorial":
            if len(args) != 1:
                return "Usage: factorial <number>"
            n = _parse_non_negative(args[0])
            if n is None:
                return "Invalid number"
            if n > math_utils.MAX_FACTORIAL_INPUT:
                return f"Number too large (max {math_utils.MAX_FACTORIAL_INPUT})"
            return f"Factorial of {n}: {math_utils.factorial(n)}"

        if cmd == "prime":
            if len(args) != 1:
                return "Usage: prime <number>"
            n = _parse_non_negative(args[0])
            if n is None:
                return "Invalid number"
            return f"Is {n} prime? {_bool_text(math_utils.is_prime(n))}"

        if cmd == "palindrome":
            if not args:
                return "Usage: palindrome <text>"
            text = " ".join(args)
            return f"Is '{text}' a palindrome? {_bool_text(string_utils.is_palindrome(text))}"

        if cmd == "reverse":
            if not args:
                return "Usage: reverse <text>"
            text = " ".join(args)
            return f"Reverse of '{text}': {string_utils.reverse_string(text)}"

        if cmd == "weekday":
            if len(args) != 1:
                return "Usage: weekday <YYYY-MM-DD>"
            try:
                return f"{args[0]} is a {date_ops.day_of_week(args[0])}"
            except ParseError as e:
                return f"Invalid date: {e}"

        if cmd == "leap":
            if len(args) != 1:
                return "Usage: leap <year>"
            try:
                year = int(args[0])
            except ValueError:
                return "Invalid number"
            return f"Is {year} a leap year? {_bool_text(date_ops.is_leap_year(year))}"

        return "Unknown command. Try factorial, prime, palindrome, reverse, weekday, leap, or exit"


def _parse_non_negative(tok: str) -> int | None:
    if not (tok.isascii() and tok.isdigit()):
        return None
    return int(tok)


def _bool_text(flag: bool) -> str:
    return "true" if flag else "false"
