"""Tests for writing reports and the command line entry point."""
import logging

import pytest

import bugdoc.__main__ as entry
from bugdoc.config import Config
from bugdoc.reporting import persistence
from bugdoc.reporting.document import assemble_document
from bugdoc.reporting.persistence import ReportWriteError, save_docx, save_pdf, write_report


@pytest.fixture
def blocked_path(tmp_path):
    """Target whose parent is a regular file, so it cannot be created."""
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    return blocker / "out.docx"


class TestWriteReport:

    def test_creates_parent_dirs(self, tmp_path):
        target = tmp_path / "a" / "b" / "report.docx"
        written = write_report(b"data", target)

        assert written == target
        assert target.read_bytes() == b"data"

    def test_unwritable_path(self, blocked_path):
        with pytest.raises(ReportWriteError) as exc_info:
            write_report(b"data", blocked_path)

        assert exc_info.value.path == blocked_path
        assert isinstance(exc_info.value.cause, OSError)
        assert str(blocked_path) in str(exc_info.value)


class TestSave:

    def test_save_docx(self, tmp_path, two_records):
        target = save_docx(assemble_document(two_records, "T", "S"), tmp_path / "log.docx")
        assert target.read_bytes()[:2] == b"PK"

    def test_save_pdf(self, tmp_path, two_records):
        target = save_pdf(assemble_document(two_records, "T", "S"), tmp_path / "log.pdf")
        assert target.read_bytes().startswith(b"%PDF")

    def test_encoder_failure_is_wrapped(self, tmp_path, two_records, monkeypatch):
        def broken(document):
            raise RuntimeError("encoder fault")

        monkeypatch.setattr(persistence, "render_docx", broken)
        target = tmp_path / "log.docx"

        with pytest.raises(ReportWriteError) as exc_info:
            save_docx(assemble_document(two_records, "T", "S"), target)

        assert isinstance(exc_info.value.cause, RuntimeError)
        assert not target.exists()


class TestMain:

    @pytest.fixture(autouse=True)
    def keep_test_logging(self, monkeypatch):
        # Leave caplog's root handler in place
        monkeypatch.setattr(entry, "setup_logging", lambda level: None)

    def test_writes_docx_and_logs_done(self, tmp_path, monkeypatch, caplog):
        target = tmp_path / "out" / "RenderX_BugLog.docx"
        monkeypatch.setattr(Config, "OUTPUT_PATH", target)
        monkeypatch.setattr(Config, "PDF_PREVIEW_PATH", "")
        caplog.set_level(logging.INFO)

        assert entry.main() == entry.EXIT_OK
        assert target.exists()
        assert "Done" in caplog.text

    def test_optional_pdf_preview(self, tmp_path, monkeypatch):
        monkeypatch.setattr(Config, "OUTPUT_PATH", tmp_path / "log.docx")
        monkeypatch.setattr(Config, "PDF_PREVIEW_PATH", str(tmp_path / "log.pdf"))

        assert entry.main() == entry.EXIT_OK
        assert (tmp_path / "log.pdf").exists()

    def test_write_failure_exit_code(self, blocked_path, monkeypatch, caplog):
        monkeypatch.setattr(Config, "OUTPUT_PATH", blocked_path)
        monkeypatch.setattr(Config, "PDF_PREVIEW_PATH", "")
        caplog.set_level(logging.INFO)

        assert entry.main() == entry.EXIT_WRITE_FAILED
        assert str(blocked_path) in caplog.text
        assert "Done" not in caplog.text
