"""Helper utilities for the Resume Parser AI system."""

import re
from typing import List, Optional, Pattern

EMAIL_RE = re.compile(r"[\w.-]+@[\w.-]+\.\w+")


def first_match(pattern: Pattern[str], text: str) -> Optional[str]:
    """Return the first literal match of pattern in text, or None."""
    if not text:
        return None
    m = pattern.search(text)
    return m.group(0) if m else None


def keyword_pattern(keywords: List[str]) -> Pattern[str]:
    """
    Case-insensitive pattern matching any keyword that starts a word, anywhere in a line.
    "Formation continue" matches "formation"; "Systèmes d'information" does not.
    """
    alternatives = "|".join(re.escape(kw) for kw in keywords)
    return re.compile(rf"(?<!\w)(?:{alternatives})", re.IGNORECASE)
