from __future__ import annotations


class ParseError(ValueError):
    """A date string or format pattern could not be interpreted.

    Covers literal/token mismatches, numeric fields outside their range
    (month 13, day 32) and days that do not exist in the given month/year.
    """
