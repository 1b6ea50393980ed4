"""
Section segmentation and block assembly for work experience and education.

A single pass over normalized lines driven by an explicit state machine:
NONE -> EXPERIENCE / EDUCATION on heading lines. Inside a section, an opening
line (date range for experience, year for education) starts a new entry and
flushes the previous one; the lines that follow fill the entry's fields greedily
in a fixed order. Assignment never backtracks: a resume listing the employer
before the job title gets the two swapped.
"""

import re
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from schemas.parsed_profile import EducationEntry, ExperienceEntry
from utils.date_parser import find_graduation_year, has_year, parse_date_range
from utils.helpers import keyword_pattern
from utils.logger import get_logger

logger = get_logger(__name__)

EXPERIENCE_KEYWORDS: List[str] = [
    "expérience professionnelle",
    "experience",
    "expérience",
    "parcours professionnel",
    "work experience",
    "employment history",
    "career history",
]
EDUCATION_KEYWORDS: List[str] = ["formation", "education", "études", "diplôme"]

_EXPERIENCE_HEADING_RE = keyword_pattern(EXPERIENCE_KEYWORDS)
_EDUCATION_HEADING_RE = keyword_pattern(EDUCATION_KEYWORDS)

# (field, minimum length) in assignment priority order
EXPERIENCE_FIELDS: Sequence[Tuple[str, int]] = (("position", 5), ("company", 3), ("description", 10))
EDUCATION_FIELDS: Sequence[Tuple[str, int]] = (("degree", 5), ("institution", 3), ("field", 5))

_EDUCATION_PART_SPLIT_RE = re.compile(r"\s*[–|]\s*|\s+-\s+")


class Section(str, Enum):
    """Which resume section the parser is currently reading."""

    NONE = "none"
    EXPERIENCE = "experience"
    EDUCATION = "education"


def _fill_first_empty(entry, fields: Sequence[Tuple[str, int]], line: str) -> bool:
    """Assign line to the first empty field whose minimum length it exceeds. False if dropped."""
    for name, min_len in fields:
        if getattr(entry, name):
            continue
        if len(line) > min_len:
            setattr(entry, name, line)
            return True
    return False


class SectionParser:
    """
    Stateful line consumer. Holds at most one open experience entry and one open
    education entry; each is emitted exactly once, when the next entry of the same
    kind opens or when finish() is called.
    """

    def __init__(self) -> None:
        self.section = Section.NONE
        self.work_experience: List[ExperienceEntry] = []
        self.education: List[EducationEntry] = []
        self._experience: Optional[ExperienceEntry] = None
        self._education: Optional[EducationEntry] = None

    def feed(self, line: str) -> None:
        """Consume one normalized line."""
        if _EXPERIENCE_HEADING_RE.search(line):
            self.section = Section.EXPERIENCE
            return
        if _EDUCATION_HEADING_RE.search(line):
            self.section = Section.EDUCATION
            return

        if self.section is Section.EXPERIENCE:
            self._feed_experience(line)
        elif self.section is Section.EDUCATION:
            self._feed_education(line)

    def finish(self) -> Tuple[List[ExperienceEntry], List[EducationEntry]]:
        """Flush open entries and return (work_experience, education)."""
        self._flush_experience()
        self._flush_education()
        return self.work_experience, self.education

    # ---- Experience ----

    def _flush_experience(self) -> None:
        entry, self._experience = self._experience, None
        if entry is None:
            return
        if entry.position:
            self.work_experience.append(entry)
        else:
            logger.debug("Discarding experience entry without position: %s-%s", entry.start_date, entry.end_date)

    def _feed_experience(self, line: str) -> None:
        date_range = parse_date_range(line)
        if date_range:
            self._flush_experience()
            start, end = date_range
            self._experience = ExperienceEntry(start_date=start, end_date=end)
            self._split_experience_line(line)
            return
        if self._experience is not None:
            _fill_first_empty(self._experience, EXPERIENCE_FIELDS, line)

    def _split_experience_line(self, line: str) -> None:
        """Date line of the form "2020 - 2023 | Position | Company"."""
        parts = [p.strip() for p in line.split("|")]
        if len(parts) < 2:
            return
        for i, part in enumerate(parts):
            if part and parse_date_range(part) is None:
                self._experience.position = part
                if i + 1 < len(parts):
                    self._experience.company = parts[i + 1]
                return

    # ---- Education ----

    def _flush_education(self) -> None:
        entry, self._education = self._education, None
        if entry is None:
            return
        if entry.degree:
            self.education.append(entry)
        else:
            logger.debug("Discarding education entry without degree: %s", entry.graduation_year)

    def _feed_education(self, line: str) -> None:
        year = find_graduation_year(line)
        if year:
            self._flush_education()
            self._education = EducationEntry(graduation_year=year)
            # "2016 - Master Informatique - Université de Lyon"
            parts = [p for p in _EDUCATION_PART_SPLIT_RE.split(line) if p and not has_year(p)]
            if parts:
                self._education.degree = parts[0]
                if len(parts) >= 2:
                    self._education.institution = parts[1]
            return
        if self._education is None:
            return
        fields = EDUCATION_FIELDS if self._education.degree else EDUCATION_FIELDS[:2]
        _fill_first_empty(self._education, fields, line)


def parse_sections(lines: List[str]) -> Tuple[List[ExperienceEntry], List[EducationEntry]]:
    """Run the section state machine over normalized lines; returns (work_experience, education)."""
    parser = SectionParser()
    for line in lines:
        parser.feed(line)
    return parser.finish()
