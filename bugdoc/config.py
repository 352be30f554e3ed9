import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()

# Base directory
BASE_DIR = Path(__file__).parent.parent


class Config:
    # --- Output ---
    OUTPUT_PATH = Path(
        os.getenv("BUGDOC_OUTPUT_PATH", str(BASE_DIR / "outputs" / "RenderX_BugLog.docx"))
    )
    # Empty string disables the PDF preview
    PDF_PREVIEW_PATH = os.getenv("BUGDOC_PDF_PREVIEW_PATH", "")

    # --- Logging ---
    LOG_LEVEL = os.getenv("BUGDOC_LOG_LEVEL", "INFO")
