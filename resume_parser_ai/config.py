"""Configuration loaded from environment variables."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env: try package dir then project root
_base = Path(__file__).resolve().parent
for _env_path in (_base / ".env", _base.parent / ".env"):
    if load_dotenv(_env_path):
        break
load_dotenv()  # also allow process env

# Logging
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# Text limits
RAW_TEXT_PREVIEW_CHARS: int = 1000

# Extraction heuristics
NAME_SCAN_LINES: int = 5
SUMMARY_MAX_LINES: int = 3
SUMMARY_MIN_LINE_LENGTH: int = 50

# Centralized format tables (extensible: add the MIME type / extension here
# and a matching ResumeFormat member; do not hardcode elsewhere).
FORMAT_MIME_TYPES: dict = {
    "pdf": ["application/pdf"],
    "docx": ["application/vnd.openxmlformats-officedocument.wordprocessingml.document"],
    "plain_text": ["text/plain", "text/markdown"],
    "rtf": ["application/rtf", "text/rtf"],
    "odt": ["application/vnd.oasis.opendocument.text"],
}

FORMAT_EXTENSIONS: dict = {
    "pdf": [".pdf"],
    "docx": [".docx"],
    "plain_text": [".txt", ".md"],
    "rtf": [".rtf"],
    "odt": [".odt"],
    "image": [".webp", ".jpg", ".jpeg", ".png", ".gif", ".bmp"],
}

SUPPORTED_EXTENSIONS: list = [
    ext for key in ("pdf", "docx", "plain_text", "rtf", "odt") for ext in FORMAT_EXTENSIONS[key]
]
IMAGE_EXTENSIONS: list = FORMAT_EXTENSIONS["image"]

# User-facing messages
UNSUPPORTED_FORMAT_MESSAGE: str = (
    "Unsupported file format. Use "
    + ", ".join(ext.lstrip(".").upper() for ext in SUPPORTED_EXTENSIONS)
    + " or images ("
    + ", ".join(ext.lstrip(".").upper() for ext in IMAGE_EXTENSIONS)
    + ")."
)
IMAGE_REQUIRES_OCR_MESSAGE: str = (
    "Image-based resume detected. Automatic analysis of images requires OCR, "
    "which is not available. Please fill in the profile manually."
)
EMPTY_TEXT_MESSAGE: str = (
    "No text could be extracted from the file. It may be a scanned or image-based "
    "document. Please check the file or fill in the profile manually."
)
