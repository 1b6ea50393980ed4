"""Tests for format detection and per-format text decoding."""

import pytest

from cv_pipeline.errors import DecodeFailure
from cv_pipeline.text_extractor import ResumeFormat, decode_document, detect_format


@pytest.mark.parametrize(
    "mime, filename, expected",
    [
        ("application/pdf", "cv", ResumeFormat.PDF),
        ("", "CV.PDF", ResumeFormat.PDF),
        ("application/vnd.openxmlformats-officedocument.wordprocessingml.document", "cv", ResumeFormat.DOCX),
        ("application/octet-stream", "cv.docx", ResumeFormat.DOCX),
        ("text/plain", "cv", ResumeFormat.PLAIN_TEXT),
        ("", "notes.md", ResumeFormat.PLAIN_TEXT),
        ("application/rtf", "cv", ResumeFormat.RTF),
        ("", "cv.rtf", ResumeFormat.RTF),
        ("application/vnd.oasis.opendocument.text", "cv", ResumeFormat.ODT),
        ("", "cv.odt", ResumeFormat.ODT),
        ("image/png", "scan", ResumeFormat.IMAGE),
        ("", "photo.JPEG", ResumeFormat.IMAGE),
        ("", "cv.webp", ResumeFormat.IMAGE),
        ("application/zip", "cv.zip", ResumeFormat.UNSUPPORTED),
        ("", "cv.doc", ResumeFormat.UNSUPPORTED),
        (None, None, ResumeFormat.UNSUPPORTED),
    ],
)
def test_detect_format(mime, filename, expected):
    assert detect_format(mime, filename) is expected


def test_plain_text_is_decoded_as_utf8():
    raw = "Élodie Martin\nDéveloppeuse".encode("utf-8")
    assert decode_document(raw, ResumeFormat.PLAIN_TEXT) == "Élodie Martin\nDéveloppeuse"


def test_plain_text_drops_bom():
    raw = "\ufeffJean Dupont".encode("utf-8")
    assert decode_document(raw, ResumeFormat.PLAIN_TEXT) == "Jean Dupont"


def test_rtf_control_words_and_braces_are_stripped():
    raw = rb"{\rtf1\ansi\deff0 {\fonttbl {\f0 Arial;}}\f0\fs24 Jean Dupont\par Python developer\par}"
    text = decode_document(raw, ResumeFormat.RTF)
    assert "\\" not in text
    assert "{" not in text and "}" not in text
    assert "Jean Dupont" in text
    assert "Python developer" in text


def test_docx_paragraphs_are_joined_by_newlines(docx_bytes):
    data = docx_bytes(["Jean Dupont", "Expérience professionnelle", "2020 - 2023"])
    assert decode_document(data, ResumeFormat.DOCX).splitlines() == [
        "Jean Dupont",
        "Expérience professionnelle",
        "2020 - 2023",
    ]


def test_odt_keeps_document_order(odt_bytes):
    data = odt_bytes("Jean Dupont", ["Formation", "2016", "Master Informatique"])
    assert decode_document(data, ResumeFormat.ODT).splitlines() == [
        "Jean Dupont",
        "Formation",
        "2016",
        "Master Informatique",
    ]


def test_pdf_pages_are_joined_and_cid_artifacts_removed(fake_pdf):
    fake_pdf(["Jean (cid:3)Dupont", None, "Python"])
    text = decode_document(b"%PDF-1.4 fake", ResumeFormat.PDF)
    assert text == "Jean Dupont\n\nPython"


def test_empty_pdf_is_a_decode_failure():
    with pytest.raises(DecodeFailure) as exc_info:
        decode_document(b"", ResumeFormat.PDF)
    assert exc_info.value.fmt == "pdf"
    assert "empty" in str(exc_info.value)


@pytest.mark.parametrize("fmt", [ResumeFormat.DOCX, ResumeFormat.ODT, ResumeFormat.PDF])
def test_corrupt_document_raises_decode_failure(fmt):
    with pytest.raises(DecodeFailure) as exc_info:
        decode_document(b"this is not a real document", fmt)
    assert exc_info.value.fmt == fmt.value
    assert exc_info.value.__cause__ is not None


@pytest.mark.parametrize("fmt", [ResumeFormat.IMAGE, ResumeFormat.UNSUPPORTED])
def test_formats_without_decoder_are_rejected(fmt):
    with pytest.raises(ValueError):
        decode_document(b"data", fmt)


def test_docx_table_text_is_read_in_document_order(docx_bytes):
    data = docx_bytes(
        ["Jean Dupont"],
        table=[["jean.dupont@example.com", "Python Docker"], ["Lyon", "06 12 34 56 78"]],
        after=["Formation"],
    )
    assert decode_document(data, ResumeFormat.DOCX).splitlines() == [
        "Jean Dupont",
        "jean.dupont@example.com",
        "Python Docker",
        "Lyon",
        "06 12 34 56 78",
        "Formation",
    ]
