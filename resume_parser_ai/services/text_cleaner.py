"""Clean decoded resume text and split it into lines for section parsing."""

import re
import unicodedata
from typing import List


def _normalize_unicode(text: str) -> str:
    """Normalize unicode (NFC) so accented keywords match their composed form."""
    if not text:
        return ""
    return unicodedata.normalize("NFC", text)


def clean_cv_text(text: str) -> str:
    """
    Normalize unicode and collapse horizontal whitespace.
    Line structure is preserved; section parsing depends on it.
    The full text is kept; only the raw text preview is capped.
    """
    if not text or not text.strip():
        return ""
    t = _normalize_unicode(text)
    t = t.replace("\r\n", "\n").replace("\r", "\n")
    t = re.sub(r"[ \t\u00a0]+", " ", t)
    return t.strip()


def split_lines(text: str) -> List[str]:
    """Split text on line boundaries; trim each line, drop empty ones, keep order."""
    if not text:
        return []
    return [line.strip() for line in text.splitlines() if line.strip()]
