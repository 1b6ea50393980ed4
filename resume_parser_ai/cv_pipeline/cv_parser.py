"""CV parser: uploaded file bytes -> text -> structured ParsedProfile."""

from config import (
    EMPTY_TEXT_MESSAGE,
    IMAGE_REQUIRES_OCR_MESSAGE,
    RAW_TEXT_PREVIEW_CHARS,
)
from cv_pipeline.cv_extractor import extract_email, extract_linkedin, extract_name, extract_phone
from cv_pipeline.cv_skill_extractor import extract_skills
from cv_pipeline.errors import UnsupportedFormat
from cv_pipeline.section_parser import parse_sections
from cv_pipeline.summary_extractor import extract_summary
from cv_pipeline.text_extractor import ResumeFormat, decode_document, detect_format
from schemas.parse_result import ParseResult
from schemas.parsed_profile import ParsedProfile
from services.text_cleaner import clean_cv_text, split_lines
from utils.logger import get_logger

logger = get_logger(__name__)


def parse_resume_text(text: str) -> ParsedProfile:
    """
    Extract a best-effort profile from decoded resume text. Never fails;
    fields that cannot be found are left empty.
    Entities and skills are searched in the full text; name, sections and summary in the lines.
    """
    lines = split_lines(text)
    first_name, last_name = extract_name(lines)
    work_experience, education = parse_sections(lines)
    return ParsedProfile(
        first_name=first_name,
        last_name=last_name,
        email=extract_email(text),
        phone=extract_phone(text),
        linkedin=extract_linkedin(text),
        summary=extract_summary(lines),
        skills=extract_skills(text),
        work_experience=work_experience,
        education=education,
    )


def parse_resume(file_bytes: bytes, mime_type: str, filename: str) -> ParseResult:
    """
    Run the full CV pipeline on an uploaded file held in memory.
    Images are not parsed (no OCR): the result carries an empty profile and requires_ocr.
    Files that decode to no text yield an empty profile and requires_manual_entry.
    Raises UnsupportedFormat for unknown types and DecodeFailure for unreadable files.
    """
    fmt = detect_format(mime_type, filename)
    logger.debug("Detected format %s for %s (%s)", fmt.value, filename, mime_type)

    if fmt is ResumeFormat.UNSUPPORTED:
        logger.warning("Unsupported file type: %s (%s)", filename, mime_type)
        raise UnsupportedFormat(mime_type, filename)

    if fmt is ResumeFormat.IMAGE:
        logger.info("Image resume %s: OCR required, manual entry", filename)
        return ParseResult(requires_ocr=True, message=IMAGE_REQUIRES_OCR_MESSAGE)

    text = clean_cv_text(decode_document(file_bytes, fmt))
    if not text:
        logger.info("No text extracted from %s: manual entry required", filename)
        return ParseResult(requires_manual_entry=True, message=EMPTY_TEXT_MESSAGE)

    profile = parse_resume_text(text)
    logger.info(
        "Parsed %s: chars=%s skills=%s experience=%s education=%s",
        filename,
        len(text),
        len(profile.skills),
        len(profile.work_experience),
        len(profile.education),
    )
    return ParseResult(profile=profile, raw_text_preview=text[:RAW_TEXT_PREVIEW_CHARS])
