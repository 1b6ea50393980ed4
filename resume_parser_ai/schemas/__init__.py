"""Schema exports."""

from .parse_result import ParseResult
from .parsed_profile import EducationEntry, ExperienceEntry, ParsedProfile

__all__ = ["ParsedProfile", "ExperienceEntry", "EducationEntry", "ParseResult"]
