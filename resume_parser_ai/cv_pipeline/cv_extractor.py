"""Rule-based extraction of contact entities (email, phone, LinkedIn, name) from CV text."""

import re
from typing import List, Optional, Tuple

from config import NAME_SCAN_LINES
from utils.helpers import EMAIL_RE, first_match

# French numbers: 06 12 34 56 78, 06.12.34.56.78, +33 6 12 34 56 78, +33 (0)6 12 34 56 78.
# Never taken from inside a longer digit run (SIRET, IBAN).
PHONE_RE = re.compile(r"(?<!\d)(?:\+33[\s.-]?(?:\(0\)[\s.-]?)?|0)[1-9](?:[\s.-]?\d{2}){4}(?!\d)")
_PHONE_SEPARATORS_RE = re.compile(r"\(0\)|[\s.-]")

LINKEDIN_RE = re.compile(
    r"(?:https?://)?(?:www\.)?linkedin\.com/in/[\w-]+(?:/[\w-]+)*",
    re.IGNORECASE,
)

# Headings and contact labels that look like a two-word name ("Work Experience", "Contact Details")
_NAME_EXCLUDED_RE = re.compile(
    r"^(contact|telephone|téléphone|adresse|email|reseaux|réseaux|phone|address|langues|languages"
    r"|competence|compétence|principales|leadership|management|gestion|projet|formation|experience"
    r"|expérience|diplome|diplôme|certification|français|anglais|espagnol|curriculum|work|education"
    r"|skills|summary|profile|profil)\b",
    re.IGNORECASE,
)


def extract_email(text: str) -> Optional[str]:
    """First email address in the text, verbatim."""
    return first_match(EMAIL_RE, text)


def extract_phone(text: str) -> Optional[str]:
    """First French phone number in the text with spaces, dots and hyphens removed."""
    raw = first_match(PHONE_RE, text)
    if raw is None:
        return None
    return _PHONE_SEPARATORS_RE.sub("", raw)


def extract_linkedin(text: str) -> Optional[str]:
    """
    First linkedin.com/in/<handle> URL, as matched (case preserved).
    PDF extraction often breaks URLs across spaces; if nothing matches, retry once
    on the text with whitespace removed.
    """
    found = first_match(LINKEDIN_RE, text)
    if found or not text:
        return found
    compact = re.sub(r"\s+-\s+", "-", text)
    compact = re.sub(r"\s+", "", compact)
    return first_match(LINKEDIN_RE, compact)


def _is_name_word(word: str) -> bool:
    """Capitalized word: uppercase first letter, lowercase rest; hyphenated parts allowed."""
    parts = word.split("-")
    return all(
        len(p) >= 2 and p.isalpha() and p[0].isupper() and p[1:].islower()
        for p in parts
    )


def _looks_like_name(line: str) -> bool:
    words = line.split()
    if not 2 <= len(words) <= 3:
        return False
    if _NAME_EXCLUDED_RE.match(line):
        return False
    return all(_is_name_word(w) for w in words)


def extract_name(lines: List[str], max_lines: int = NAME_SCAN_LINES) -> Tuple[Optional[str], Optional[str]]:
    """
    Find the candidate name among the first max_lines normalized lines.
    A line qualifies only if it is entirely 2-3 capitalized words. Returns (first_name, last_name).
    """
    for line in lines[:max_lines]:
        if _looks_like_name(line):
            words = line.split()
            return words[0], " ".join(words[1:])
    return None, None
