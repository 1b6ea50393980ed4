"""CV upload pipeline: format decoding (PDF/DOCX/ODT/TXT/RTF), cleaning, rule-based extraction."""

from cv_pipeline.cv_parser import parse_resume, parse_resume_text
from cv_pipeline.errors import DecodeFailure, ResumeParseError, UnsupportedFormat
from cv_pipeline.text_extractor import ResumeFormat, decode_document, detect_format
from schemas.parse_result import ParseResult
from schemas.parsed_profile import ParsedProfile

__all__ = [
    "parse_resume",
    "parse_resume_text",
    "detect_format",
    "decode_document",
    "ResumeFormat",
    "ParseResult",
    "ParsedProfile",
    "ResumeParseError",
    "UnsupportedFormat",
    "DecodeFailure",
]
