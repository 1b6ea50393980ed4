"""Parse year ranges and graduation years from resume lines (French and English)."""

import re
from typing import Optional, Tuple

# Canonical end date for ongoing positions
PRESENT_LABEL = "Présent"

# Type alias: (start_year, end_year_or_present)
DateRange = Tuple[str, str]

_PRESENT = r"(?:présent|present|aujourd['’]hui|actuel)"
_MONTHS = (
    r"(?<!\w)(?:janvier|février|mars|avril|mai|juin|juillet|août|septembre|octobre|novembre|décembre"
    r"|january|february|march|april|june|july|august|september|october|november|december"
    r"|jan|feb|fév|mar|apr|avr|may|jun|jul|juil|aug|sep|sept|oct|nov|dec|déc)\.?"
)

# 2020 - 2023, 2020–Présent
_YEAR_RANGE_RE = re.compile(rf"(\d{{4}})\s*[-–]\s*(\d{{4}}|{_PRESENT})", re.IGNORECASE)
# Septembre 2019 à Aujourd'hui, Jan 2020 - Mar 2022
_MONTH_RANGE_RE = re.compile(
    rf"{_MONTHS}\s+(\d{{4}})\s+(?:à|[-–])\s+(?:{_MONTHS}\s+(\d{{4}})|({_PRESENT}))",
    re.IGNORECASE,
)
# 2016 or 2014 - 2016
_YEAR_RE = re.compile(r"(?<!\d)(\d{4})(?!\d)(?:\s*[-–]\s*(\d{4})(?!\d))?")
_PRESENT_RE = re.compile(_PRESENT, re.IGNORECASE)


def is_present_token(token: str) -> bool:
    """True if token is an ongoing-employment synonym (present, présent, actuel, aujourd'hui)."""
    return bool(token) and bool(_PRESENT_RE.search(token))


def parse_date_range(line: str) -> Optional[DateRange]:
    """
    Extract an employment date range from a line.
    Handles: "2020 - 2023", "2019 – Présent", "Septembre 2019 à Aujourd'hui", "Jan 2020 - Mar 2022".
    Returns (start_year, end) where end is a year or PRESENT_LABEL, or None if no range is found.
    """
    if not line:
        return None

    m = _YEAR_RANGE_RE.search(line)
    if m:
        start, end = m.group(1), m.group(2)
        return (start, PRESENT_LABEL if is_present_token(end) else end)

    m = _MONTH_RANGE_RE.search(line)
    if m:
        start = m.group(1)
        end = m.group(2) or PRESENT_LABEL
        return (start, end)

    return None


def find_graduation_year(line: str) -> Optional[str]:
    """Return the year in a line; for a "YYYY - YYYY" range, the end year. None if no year."""
    if not line:
        return None
    m = _YEAR_RE.search(line)
    if not m:
        return None
    return m.group(2) or m.group(1)


def has_year(part: str) -> bool:
    """True if a line fragment contains a 4-digit year."""
    return _YEAR_RE.search(part) is not None
