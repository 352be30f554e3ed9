"""
Generate the RenderX Vulkan bug log.

    python -m bugdoc

Writes the DOCX to Config.OUTPUT_PATH (plus a PDF preview when
Config.PDF_PREVIEW_PATH is set) and exits 0. A failed write is logged
with the target path and cause and exits with EXIT_WRITE_FAILED.
"""
import logging
import sys
import traceback

from .config import Config
from .logging_config import setup_logging
from .reporting import ReportWriteError, build_bug_log, save_docx, save_pdf

logger = logging.getLogger("BugDoc")

EXIT_OK = 0
EXIT_WRITE_FAILED = 2


def main() -> int:
    setup_logging(Config.LOG_LEVEL)

    document = build_bug_log()

    try:
        save_docx(document, Config.OUTPUT_PATH)
        if Config.PDF_PREVIEW_PATH:
            save_pdf(document, Config.PDF_PREVIEW_PATH)
    except ReportWriteError as e:
        logger.error(f"Bug log generation failed for {e.path}: {e.cause}")
        logger.error(traceback.format_exc())
        return EXIT_WRITE_FAILED

    logger.info("Done")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
