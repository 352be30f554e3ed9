"""
Reporting Module.

Builds the bug log block tree and encodes it as DOCX (and optionally PDF).
"""
from .document import assemble_document, build_bug_log
from .docx_builder import build_docx, render_docx
from .pdf_export import render_pdf
from .persistence import ReportWriteError, save_docx, save_pdf, write_report

__all__ = [
    # Document
    "assemble_document",
    "build_bug_log",
    # DOCX
    "build_docx",
    "render_docx",
    # PDF
    "render_pdf",
    # Persistence
    "ReportWriteError",
    "save_docx",
    "save_pdf",
    "write_report",
]
