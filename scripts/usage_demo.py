#!/usr/bin/env python3
"""Walk through every utility module once, non-interactively.

Usage:
  PYTHONPATH=. python3 scripts/usage_demo.py
  PYTHONPATH=. python3 scripts/usage_demo.py --tmp-dir /tmp/cli-utils-demo
"""

from __future__ import annotations

import argparse
import tempfile
from pathlib import Path

from cli_utils import file_io, math_utils, string_utils
from cli_utils.date import ops as date_ops


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--tmp-dir", type=Path, default=Path(tempfile.gettempdir()))
    args = ap.parse_args()

    print("=== CLI Utils Library Examples ===\n")

    print("Math Utils:")
    print(f"  Factorial of 5: {math_utils.factorial(5)}")
    print(f"  GCD of 48 and 18: {math_utils.gcd(48, 18)}")
    print(f"  Is 17 prime? {math_utils.is_prime(17)}")
    print(f"  LCM of 4 and 6: {math_utils.lcm(4, 6)}")
    print()

    print("String Utils:")
    print(f"  Is 'racecar' a palindrome? {string_utils.is_palindrome('racecar')}")
    print(f"  Count of 'l' in 'hello world': {string_utils.count_char('hello world', 'l')}")
    print(f"  Reverse of 'hello': {string_utils.reverse_string('hello')}")
    print(f"  Title case of 'hello world': {string_utils.to_title_case('hello world')}")
    print(f"  Word count of 'hello world programming': {string_utils.word_count('hello world programming')}")
    print()

    print("Date Utils:")
    print(f"  Current date (YYYY-MM-DD): {date_ops.current_date()}")
    print(f"  Days between 2023-01-10 and 2023-01-05: {date_ops.difference_in_days('2023-01-10', '2023-01-05')}")
    print(f"  Is '2023-12-25' valid as Y-m-d? {date_ops.is_valid_format('2023-12-25', 'Y-m-d')}")
    print(f"  Convert '2023-12-25' to DD/MM/YYYY: {date_ops.to_dd_mm_yyyy('2023-12-25')}")
    print(f"  Add 7 days to '2023-12-25': {date_ops.add_days('2023-12-25', 7)}")
    print(f"  Weekday of '2023-12-25': {date_ops.day_of_week('2023-12-25')}")
    print(f"  Is 2024 a leap year? {date_ops.is_leap_year(2024)}")
    print()

    print("File I/O Utils:")
    file_io.create_dir_all(args.tmp_dir)
    tmp = args.tmp_dir / "cli_utils_example.txt"
    file_io.write_file(tmp, "Hello, World!\nThis is a sample file.\nCreated by cli-utils example.")
    try:
        print(f"  OK: created {tmp}")
        print(f"  File exists? {file_io.file_exists(tmp)}")
        print(f"  File size: {file_io.file_size(tmp)} bytes")
        print(f"  First line: {file_io.read_first_n_lines(tmp, 1)[0]}")
        print(f"  Number of lines: {len(file_io.read_lines(tmp))}")
        file_io.append_file(tmp, "\nAppended line!")
        print("  OK: appended a line")
    finally:
        file_io.delete_file(tmp)
    print("  OK: cleaned up")


if __name__ == "__main__":
    main()
