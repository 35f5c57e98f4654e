"""
Data Sheet Service

Central entry point: parse rows, pick a backend, render to a sink or into
memory. Every call is independent; nothing is shared between calls except
the read-only uploads directory.
"""

from io import BytesIO
from pathlib import Path
from typing import Any, BinaryIO, Iterable, Optional, Union
import logging

from asgiref.sync import sync_to_async
from django.utils.text import slugify

from . import conf
from .assets import AssetResolver
from .document import ParsedDocument
from .parser import parse
from .rendering.dto import PdfResult
from .rendering.registry import RendererRegistry, get_default_registry


logger = logging.getLogger(__name__)

Source = Union[ParsedDocument, Iterable[Any], None]


class DatasheetService:
    """
    Core service for data sheet generation.

    Usage:
        service = DatasheetService()
        result = service.render_to_pdf(rows, backend='html')
        response = HttpResponse(result.pdf_bytes, content_type=result.content_type)
    """

    def __init__(
        self,
        registry: Optional[RendererRegistry] = None,
        uploads_dir: Optional[Union[str, Path]] = None
    ):
        """
        Initialize the service.

        Args:
            registry: Renderer registry (defaults to the global registry)
            uploads_dir: Asset root (defaults to DATASHEETS_UPLOADS_DIR)
        """
        self.registry = registry or get_default_registry()
        self.uploads_dir = uploads_dir

    def parse(self, rows: Optional[Iterable[Any]]) -> ParsedDocument:
        return parse(rows)

    def _document(self, source: Source) -> ParsedDocument:
        if isinstance(source, ParsedDocument):
            return source
        return self.parse(source)

    def render(self, source: Source, sink: BinaryIO, *, backend: Optional[str] = None) -> ParsedDocument:
        """
        Render rows or a parsed document as PDF into a sink.

        Args:
            source: Spreadsheet rows or an already parsed document
            sink: Writable binary file-like object
            backend: Backend key (defaults to DATASHEETS_DEFAULT_BACKEND)

        Returns:
            The rendered document

        Raises:
            KeyError: If the backend is not registered
            RenderError: If rendering fails; discard what was written
        """
        backend = backend or conf.get_default_backend()
        renderer = self.registry.get_renderer(backend)
        document = self._document(source)

        logger.debug(f"Rendering data sheet {document.header!r} with backend '{backend}'")
        renderer.render(document, AssetResolver(self.uploads_dir), sink)
        return document

    def render_to_pdf(
        self,
        source: Source,
        *,
        backend: Optional[str] = None,
        filename: Optional[str] = None
    ) -> PdfResult:
        """
        Render into memory.

        Returns:
            PdfResult with PDF bytes and metadata
        """
        backend = backend or conf.get_default_backend()
        buffer = BytesIO()
        try:
            document = self.render(source, buffer, backend=backend)
            pdf_bytes = buffer.getvalue()
        finally:
            buffer.close()

        return PdfResult(
            pdf_bytes=pdf_bytes,
            filename=filename or self.get_filename(document),
            backend=backend,
        )

    @staticmethod
    def get_filename(document: ParsedDocument) -> str:
        """Download name derived from the product name, e.g. 'acme-x1.pdf'."""
        slug = slugify(document.header)
        return f"{slug}.pdf" if slug else 'datasheet.pdf'

    async def arender(self, source: Source, sink: BinaryIO, *, backend: Optional[str] = None) -> ParsedDocument:
        """Async variant of :meth:`render`, run in a worker thread."""
        return await sync_to_async(self.render, thread_sensitive=False)(source, sink, backend=backend)

    async def arender_to_pdf(
        self,
        source: Source,
        *,
        backend: Optional[str] = None,
        filename: Optional[str] = None
    ) -> PdfResult:
        """Async variant of :meth:`render_to_pdf`, run in a worker thread."""
        return await sync_to_async(self.render_to_pdf, thread_sensitive=False)(
            source, backend=backend, filename=filename
        )
