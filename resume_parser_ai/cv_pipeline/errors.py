"""Typed failures of the resume parsing pipeline."""

from typing import Optional

from config import UNSUPPORTED_FORMAT_MESSAGE


class ResumeParseError(Exception):
    """Base class for failures surfaced to the caller of parse_resume."""


class UnsupportedFormat(ResumeParseError):
    """Declared MIME type and file extension are not in the dispatch table."""

    def __init__(self, mime_type: str = "", filename: str = "") -> None:
        self.mime_type = mime_type
        self.filename = filename
        super().__init__(UNSUPPORTED_FORMAT_MESSAGE)


class DecodeFailure(ResumeParseError):
    """A recognized format's decoder raised (e.g. corrupt PDF)."""

    def __init__(self, fmt: str, reason: Optional[str] = None) -> None:
        self.fmt = fmt
        self.reason = reason or "unknown error"
        super().__init__(f"Failed to read {fmt.upper()} file: {self.reason}")
