"""Utility exports."""

from .date_parser import find_graduation_year, is_present_token, parse_date_range
from .helpers import first_match, keyword_pattern
from .logger import get_logger

__all__ = [
    "get_logger",
    "keyword_pattern",
    "first_match",
    "find_graduation_year",
    "is_present_token",
    "parse_date_range",
]
