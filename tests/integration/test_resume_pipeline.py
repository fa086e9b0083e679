"""
Integration tests for the document → sections → analysis pipeline.

Run with: pytest tests/integration/test_resume_pipeline.py -v
"""

from pathlib import Path

import pytest

from apptrack.contexts.analysis import EducationLevel, analyze
from apptrack.contexts.analysis.analysis_patterns import SUGGESTION_ACTION_VERBS
from apptrack.contexts.intake import (
    DocumentExtractionError,
    SectionCategory,
    extract_text,
    parse_resume_text,
)
from apptrack.contexts.intake import extractor
from apptrack.contexts.intake.extractor import resolve_file_type

SAMPLE_RESUME = (
    "SUMMARY\r\n"
    "Backend engineer with 4 years of experience.\r\n"
    "\r\n"
    "SKILLS\r\n"
    "Python, Go, PostgreSQL, Docker, AWS, Git\r\n"
    "\r\n"
    "EXPERIENCE\r\n"
    "2019–2023: Backend Engineer at Acme Corp. Improved API latency by 30%.\r\n"
)


@pytest.mark.integration
class TestResumePipeline:
    """End-to-end behavior on a small headed résumé."""

    @pytest.fixture
    def document(self):
        return parse_resume_text(SAMPLE_RESUME)

    def test_sections(self, document):
        assert document.categories == (
            SectionCategory.SUMMARY,
            SectionCategory.SKILLS,
            SectionCategory.EXPERIENCE,
        )
        assert document.get_section(SectionCategory.SKILLS).body == (
            "Python, Go, PostgreSQL, Docker, AWS, Git"
        )
        assert "\r" not in document.normalized_text

    def test_analysis(self, document):
        result = analyze(document, current_year=2025)

        assert result.skills == ("Python", "Go", "PostgreSQL", "Docker", "AWS", "Git")
        assert result.missing_keywords == ("JavaScript", "SQL", "React", "Agile")
        assert result.experience_years == 4
        assert result.education_level is None
        # "Improved" counts as quantified impact but is not an action verb
        assert result.suggestions == (SUGGESTION_ACTION_VERBS,)

    def test_education_section(self):
        document = parse_resume_text(SAMPLE_RESUME + "\r\nEDUCATION\r\nMaster of Science, 2018\r\n")
        result = analyze(document, current_year=2025)

        assert document.categories[-1] == SectionCategory.EDUCATION
        assert result.education_level == EducationLevel.MASTERS

    def test_headerless_resume(self):
        raw = (
            "Data engineer building pipelines.\n\n\n"
            "Tools: Python, SQL, Airflow, Docker, Git\n\n"
            "Globex 2016 - present, led the platform team"
        )
        document = parse_resume_text(raw)
        result = analyze(document, current_year=2025)

        assert document.categories == (
            SectionCategory.SUMMARY,
            SectionCategory.SKILLS,
            SectionCategory.EXPERIENCE,
        )
        assert result.skills == ("Python", "SQL", "Docker", "Git")
        assert result.experience_years == 9
        assert len(document.warnings) == 1


@pytest.mark.integration
class TestExtractText:
    """Tests for document-to-text extraction."""

    def test_plain_text(self, tmp_path):
        path = tmp_path / "resume.txt"
        path.write_text("SKILLS\nPython, Go\n", encoding="utf-8")

        assert extract_text(path) == "SKILLS\nPython, Go\n"

    def test_missing_file(self, tmp_path):
        with pytest.raises(DocumentExtractionError, match="Document not found") as exc_info:
            extract_text(tmp_path / "missing.pdf")

        assert exc_info.value.path == tmp_path / "missing.pdf"

    def test_invalid_utf8_text_file(self, tmp_path):
        path = tmp_path / "resume.txt"
        path.write_bytes(b"SKILLS\n\xff\xfe Python")

        with pytest.raises(DocumentExtractionError) as exc_info:
            extract_text(path)

        assert isinstance(exc_info.value.original_error, UnicodeDecodeError)

    def test_unknown_type_is_best_effort(self, tmp_path):
        path = tmp_path / "resume.doc"
        path.write_bytes(b"SKILLS\n\xff Python")

        text = extract_text(path)

        assert text.startswith("SKILLS\n")
        assert "\ufffd" in text
        assert text.endswith("Python")

    def test_pdf_pages_joined_with_blank_line(self, tmp_path, monkeypatch):
        path = tmp_path / "resume.pdf"
        path.write_bytes(b"%PDF-1.4 placeholder")

        class FakePage:
            def __init__(self, text):
                self._text = text

            def extract_text(self):
                return self._text

        class FakePdf:
            pages = [FakePage("SUMMARY\nEngineer."), FakePage(None), FakePage("SKILLS\nGo")]

            def __enter__(self):
                return self

            def __exit__(self, *exc):
                return False

        opened = []

        def fake_open(pdf_path):
            opened.append(pdf_path)
            return FakePdf()

        monkeypatch.setattr(extractor.pdfplumber, "open", fake_open)

        assert extract_text(path) == "SUMMARY\nEngineer.\n\n\n\nSKILLS\nGo"
        assert opened == [path]

    def test_pdf_failure_is_wrapped(self, tmp_path, monkeypatch):
        path = tmp_path / "resume.pdf"
        path.write_bytes(b"not a pdf")

        def broken_open(pdf_path):
            raise OSError("corrupt file")

        monkeypatch.setattr(extractor.pdfplumber, "open", broken_open)

        with pytest.raises(DocumentExtractionError, match="corrupt file"):
            extract_text(path, file_type="application/pdf")


@pytest.mark.integration
@pytest.mark.parametrize(
    "name, hint, expected",
    [
        ("resume.pdf", None, "pdf"),
        ("RESUME.PDF", None, "pdf"),
        ("resume.txt", None, "text"),
        ("resume.docx", None, "other"),
        ("resume", None, "other"),
        ("upload.bin", "application/pdf", "pdf"),
        ("resume.pdf", "text/plain", "text"),
    ],
)
def test_resolve_file_type(name, hint, expected):
    assert resolve_file_type(Path(name), hint) == expected
