"""Date helpers over strings in configurable format patterns.

Dates are validated on the way in (CalendarDate), so everything downstream of
parse_date works with real proleptic-Gregorian dates only.
"""

from .calendar import is_leap_year
from .ops import (
    DEFAULT_FORMAT,
    DMY_FORMAT,
    add_days,
    convert_format,
    current_date,
    day_of_week,
    difference_in_days,
    format_date,
    is_valid_format,
    parse_date,
    to_dd_mm_yyyy,
    to_yyyy_mm_dd,
)
from .types import CalendarDate
