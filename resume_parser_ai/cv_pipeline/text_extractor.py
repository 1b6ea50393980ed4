"""Extract raw text from uploaded CV files (PDF, DOCX, ODT, TXT/MD, RTF). In-memory only."""

import re
from enum import Enum
from io import BytesIO
from typing import Callable, Dict

import pdfplumber
from docx import Document
from docx.table import Table
from docx.text.paragraph import Paragraph
from odf import teletype
from odf.element import Element
from odf.namespaces import TEXTNS
from odf.office import Text as OfficeText
from odf.opendocument import load as load_odf

from config import FORMAT_EXTENSIONS, FORMAT_MIME_TYPES
from cv_pipeline.errors import DecodeFailure
from utils.logger import get_logger

logger = get_logger(__name__)

_CID_RE = re.compile(r"\(cid:\d+\)")
_RTF_CONTROL_WORD_RE = re.compile(r"\\[a-z]+\d*\s?")
_RTF_BRACES_RE = re.compile(r"[{}]")
_ODT_BLOCKS = {(TEXTNS, "p"), (TEXTNS, "h")}


class ResumeFormat(str, Enum):
    """Closed set of upload formats the pipeline dispatches on."""

    PDF = "pdf"
    DOCX = "docx"
    PLAIN_TEXT = "plain_text"
    RTF = "rtf"
    ODT = "odt"
    IMAGE = "image"
    UNSUPPORTED = "unsupported"


def _matches(fmt: ResumeFormat, mime: str, name: str) -> bool:
    """True if the MIME type or the file extension belongs to fmt."""
    if mime in FORMAT_MIME_TYPES.get(fmt.value, []):
        return True
    return any(name.endswith(ext) for ext in FORMAT_EXTENSIONS.get(fmt.value, []))


def detect_format(mime_type: str, filename: str) -> ResumeFormat:
    """
    Resolve the upload format from the declared MIME type or the file name.
    Checked in a fixed order; the first format whose MIME type or extension matches wins.
    """
    mime = (mime_type or "").lower().strip()
    name = (filename or "").lower().strip()

    for fmt in (
        ResumeFormat.PDF,
        ResumeFormat.DOCX,
        ResumeFormat.PLAIN_TEXT,
        ResumeFormat.RTF,
        ResumeFormat.ODT,
    ):
        if _matches(fmt, mime, name):
            return fmt
    if mime.startswith("image/") or _matches(ResumeFormat.IMAGE, mime, name):
        return ResumeFormat.IMAGE
    return ResumeFormat.UNSUPPORTED


def _extract_pdf(file_bytes: bytes) -> str:
    """Extract text from PDF using pdfplumber; strips (cid:N) glyph artifacts."""
    if not file_bytes:
        raise ValueError("the PDF file is empty")
    with pdfplumber.open(BytesIO(file_bytes)) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]
    return _CID_RE.sub("", "\n".join(pages))


def _iter_docx_blocks(container):
    """Yield paragraph text in document order, descending into table cells (nested tables included)."""
    for block in container.iter_inner_content():
        if isinstance(block, Paragraph):
            yield block.text
        elif isinstance(block, Table):
            # merged cells repeat across row.cells; read each underlying cell once
            seen = set()
            for row in block.rows:
                for cell in row.cells:
                    if cell._tc in seen:
                        continue
                    seen.add(cell._tc)
                    yield from _iter_docx_blocks(cell)


def _extract_docx(file_bytes: bytes) -> str:
    """Extract paragraph and table text from DOCX using python-docx."""
    doc = Document(BytesIO(file_bytes))
    return "\n".join(_iter_docx_blocks(doc))


def _iter_odt_blocks(node):
    """Yield text of paragraphs and headings in document order (tables and lists included)."""
    for child in node.childNodes:
        if not isinstance(child, Element):
            continue
        if child.qname in _ODT_BLOCKS:
            yield teletype.extractText(child)
        else:
            yield from _iter_odt_blocks(child)


def _extract_odt(file_bytes: bytes) -> str:
    """Extract paragraph and heading text from ODT using odfpy."""
    doc = load_odf(BytesIO(file_bytes))
    blocks = []
    for body in doc.getElementsByType(OfficeText):
        blocks.extend(_iter_odt_blocks(body))
    return "\n".join(blocks)


def _extract_plain_text(file_bytes: bytes) -> str:
    """Decode TXT/MD bytes as UTF-8 (BOM dropped, invalid bytes replaced)."""
    return file_bytes.decode("utf-8-sig", errors="replace")


def _extract_rtf(file_bytes: bytes) -> str:
    """Basic RTF extraction: drop control words and braces."""
    text = file_bytes.decode("utf-8", errors="replace")
    text = _RTF_CONTROL_WORD_RE.sub("", text)
    text = _RTF_BRACES_RE.sub("", text)
    return text.strip()


_DECODERS: Dict[ResumeFormat, Callable[[bytes], str]] = {
    ResumeFormat.PDF: _extract_pdf,
    ResumeFormat.DOCX: _extract_docx,
    ResumeFormat.ODT: _extract_odt,
    ResumeFormat.PLAIN_TEXT: _extract_plain_text,
    ResumeFormat.RTF: _extract_rtf,
}


def decode_document(file_bytes: bytes, fmt: ResumeFormat) -> str:
    """
    Decode bytes of a text-bearing format into plain text.
    Raises DecodeFailure if the format-specific decoder fails (corrupt or empty file).
    IMAGE and UNSUPPORTED have no decoder; callers must branch on them first.
    """
    decoder = _DECODERS.get(fmt)
    if decoder is None:
        raise ValueError(f"No text decoder for format: {fmt.value}")
    try:
        return decoder(file_bytes or b"")
    except Exception as e:
        logger.warning("%s extraction failed: %s", fmt.value.upper(), e)
        raise DecodeFailure(fmt.value, str(e)) from e
