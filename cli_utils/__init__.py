"""Small utility collection: math, string, date and file helpers plus a demo menu."""

from .errors import ParseError

__version__ = "0.1.0"
