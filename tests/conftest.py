"""Shared fixtures: sample resume text and in-memory document builders."""

from io import BytesIO

import pytest
from docx import Document
from odf.opendocument import OpenDocumentText
from odf.text import H, P

SAMPLE_RESUME_TEXT = """Jean Dupont
Développeur Full Stack
jean.dupont@example.com | 06 12 34 56 78
linkedin.com/in/jean-dupont
Profil
Développeur passionné par la conception d'applications web robustes et maintenables.
Habitué aux environnements agiles, je travaille avec Python, React et Docker au quotidien.
Court.
Expérience professionnelle
2020 - Présent | Lead Developer | Acme Corp
Pilotage d'une équipe de cinq développeurs sur une plateforme SaaS.
2016 - 2020
Développeur Backend
Globex
Conception d'API REST API en Python et PostgreSQL.
Formation
2016 - Master Informatique - Université de Lyon
Spécialité génie logiciel
2014
Licence Mathématiques
Université de Grenoble
"""


@pytest.fixture
def sample_text() -> str:
    return SAMPLE_RESUME_TEXT


@pytest.fixture
def docx_bytes():
    """Build a DOCX file in memory: paragraphs, an optional table (list of rows), trailing paragraphs."""

    def build(paragraphs, table=None, after=()):
        doc = Document()
        for para in paragraphs:
            doc.add_paragraph(para)
        if table:
            tbl = doc.add_table(rows=len(table), cols=len(table[0]))
            for row, values in zip(tbl.rows, table):
                for cell, value in zip(row.cells, values):
                    cell.text = value
        for para in after:
            doc.add_paragraph(para)
        buf = BytesIO()
        doc.save(buf)
        return buf.getvalue()

    return build


@pytest.fixture
def odt_bytes(tmp_path):
    """Build an ODT file from a heading and a list of paragraphs."""

    def build(heading, paragraphs):
        doc = OpenDocumentText()
        doc.text.addElement(H(outlinelevel=1, text=heading))
        for para in paragraphs:
            doc.text.addElement(P(text=para))
        path = tmp_path / "resume.odt"
        doc.save(str(path))
        return path.read_bytes()

    return build


class FakePage:
    def __init__(self, text):
        self._text = text

    def extract_text(self):
        return self._text


class FakePdf:
    def __init__(self, pages):
        self.pages = [FakePage(t) for t in pages]

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


@pytest.fixture
def fake_pdf(monkeypatch):
    """Patch pdfplumber.open so PDF decoding returns the given page texts."""
    from cv_pipeline import text_extractor

    def install(pages):
        monkeypatch.setattr(text_extractor.pdfplumber, "open", lambda fp: FakePdf(pages))

    return install
