"""
Data Transfer Objects for Data Sheet Rendering
"""

from dataclasses import dataclass


@dataclass
class PdfResult:
    """
    Result of rendering a data sheet into memory.

    Contains the PDF bytes and metadata for HTTP responses.
    """

    pdf_bytes: bytes
    filename: str
    backend: str = ''
    content_type: str = "application/pdf"

    def __len__(self) -> int:
        """Return the size of PDF in bytes"""
        return len(self.pdf_bytes)
