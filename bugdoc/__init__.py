"""
BugDoc - bug log documents as styled Word reports.

Sub-modules:
- records: BugRecord and the compiled RenderX record set
- reporting.document: block tree, builders, assembler
- reporting.docx_builder / pdf_export: encoders
- reporting.persistence: writing files
"""
from .records import BugRecord

__version__ = "1.0.0"

__all__ = ["BugRecord", "__version__"]
