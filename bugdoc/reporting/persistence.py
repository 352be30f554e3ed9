"""
Report persistence: encode a Document and write it to disk.

Each save is a single blocking attempt. Any encoder or filesystem failure
is raised once as ReportWriteError carrying the target path and cause.
"""
import logging
from pathlib import Path
from typing import Union

from .document.blocks import Document
from .docx_builder import render_docx
from .pdf_export import render_pdf

logger = logging.getLogger(__name__)


class ReportWriteError(Exception):
    """Serializing or writing a report file failed."""

    def __init__(self, path: Union[str, Path], cause: BaseException):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Could not write report to {self.path}: {cause}")


def write_report(data: bytes, output_path: Union[str, Path]) -> Path:
    """
    Write encoded report bytes, creating parent directories.

    Args:
        data: Encoded file contents
        output_path: Target file path

    Returns:
        Path that was written

    Raises:
        ReportWriteError: if the directory or file cannot be written
    """
    path = Path(output_path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "wb") as f:
            f.write(data)
    except OSError as e:
        raise ReportWriteError(path, e) from e

    logger.info(f"Report saved to: {path} ({len(data)} bytes)")
    return path


def save_docx(document: Document, output_path: Union[str, Path]) -> Path:
    try:
        data = render_docx(document)
    except Exception as e:
        raise ReportWriteError(output_path, e) from e
    return write_report(data, output_path)


def save_pdf(document: Document, output_path: Union[str, Path]) -> Path:
    try:
        data = render_pdf(document)
    except Exception as e:
        raise ReportWriteError(output_path, e) from e
    return write_report(data, output_path)
