"""
Interfaces for Data Sheet Rendering

Defines the renderer contract shared by both backends and the HTML-to-PDF
engine interface used by the HTML backend.
"""

from abc import ABC, abstractmethod
from typing import BinaryIO, Optional

from datasheets.assets import AssetResolver
from datasheets.document import ParsedDocument


class IDatasheetRenderer(ABC):
    """
    Interface for data sheet renderers.

    Implementations paint the same ParsedDocument in their own way; what
    text appears is decided by ``datasheets.formatting``.
    """

    backend: str = ''

    @abstractmethod
    def render(self, document: ParsedDocument, assets: AssetResolver, sink: BinaryIO) -> None:
        """
        Render a document as PDF into a binary sink.

        Args:
            document: Parsed data sheet
            assets: Resolver for logo and product images
            sink: Writable binary file-like object

        Raises:
            RenderError: If rendering fails; bytes already written to the
                sink are incomplete and must be discarded
        """
        pass


class IPdfRenderer(ABC):
    """
    Interface for HTML-to-PDF engines.

    Implementations convert HTML to PDF bytes using their specific engine.
    """

    @abstractmethod
    def render_html_to_pdf(self, html: str, base_url: str, *, footer_html: Optional[str] = None) -> bytes:
        """
        Render HTML to PDF.

        Args:
            html: HTML string to render
            base_url: Base URL for resolving relative URLs
            footer_html: Optional footer repeated on every page; the engine
                substitutes page numbers into it

        Returns:
            PDF content as bytes

        Raises:
            Exception: If rendering fails
        """
        pass
