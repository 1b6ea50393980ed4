"""Locate the profile/summary heading and collect the paragraph that follows it."""

from typing import List, Optional

from config import SUMMARY_MAX_LINES, SUMMARY_MIN_LINE_LENGTH
from utils.helpers import keyword_pattern

SUMMARY_KEYWORDS: List[str] = ["profil", "summary", "résumé", "about", "à propos"]

_SUMMARY_HEADING_RE = keyword_pattern(SUMMARY_KEYWORDS)


def extract_summary(
    lines: List[str],
    max_lines: int = SUMMARY_MAX_LINES,
    min_length: int = SUMMARY_MIN_LINE_LENGTH,
) -> Optional[str]:
    """
    Collect up to max_lines lines longer than min_length after the first summary heading.
    Shorter lines are skipped, not treated as the end of the summary. Returns None if nothing qualifies.
    """
    collected: List[str] = []
    in_summary = False
    for line in lines:
        if not in_summary:
            in_summary = bool(_SUMMARY_HEADING_RE.search(line))
            continue
        if len(line) > min_length:
            collected.append(line)
            if len(collected) >= max_lines:
                break
    return " ".join(collected) if collected else None
