"""
HTML Renderer Implementation

HTML/print backend: fills the data sheet template and prints it to PDF
with an IPdfRenderer engine (headless Chromium by default).
"""

from typing import BinaryIO, Optional
import logging

from django.template.loader import render_to_string
from django.utils.html import format_html
from django.utils.safestring import SafeString, mark_safe

from datasheets import conf
from datasheets.assets import AssetResolver
from datasheets.document import ParsedDocument, SectionKind
from datasheets.exceptions import RenderError
from datasheets.formatting import SectionView, document_views, product_name, version_date

from .chromium import ChromiumPdfRenderer
from .interfaces import IDatasheetRenderer, IPdfRenderer


logger = logging.getLogger(__name__)

PDF_MAGIC = b'%PDF'

SECTION_TEMPLATES = {
    SectionKind.LIST: 'datasheets/sections/list.html',
    SectionKind.KEY_VALUE_TABLE: 'datasheets/sections/key_value_table.html',
    SectionKind.ZEBRA_TABLE: 'datasheets/sections/zebra_table.html',
}


class HtmlRenderer(IDatasheetRenderer):
    """
    Data sheet renderer going through HTML.

    Pipeline:
    1. Render sections and the page template to HTML
    2. Inline logo and product image as data URIs
    3. Delegate printing to an IPdfRenderer engine
    4. Write the PDF bytes to the sink

    Usage:
        renderer = HtmlRenderer()
        with open('datasheet.pdf', 'wb') as sink:
            renderer.render(document, AssetResolver(), sink)
    """

    backend = 'html'
    template_name = 'datasheets/datasheet.html'
    footer_template_name = 'datasheets/footer.html'

    def __init__(self, engine: Optional[IPdfRenderer] = None):
        """
        Initialize the renderer.

        Args:
            engine: HTML-to-PDF engine. If None, uses headless Chromium.
        """
        self.engine = engine or self._get_default_engine()

    def render_section(self, view: SectionView) -> str:
        return render_to_string(SECTION_TEMPLATES[view.kind], {'view': view})

    def render_sections(self, document: ParsedDocument) -> SafeString:
        """Concatenate the markup of all non-empty sections."""
        parts = [self.render_section(view) for view in document_views(document)]
        return mark_safe(''.join(parts))

    def build_context(self, document: ParsedDocument, assets: AssetResolver) -> dict:
        """
        Build the template context for a document.

        Returns:
            Dictionary with the page placeholders
        """
        logo_uri = assets.read_data_uri(assets.find_logo())
        if logo_uri:
            logo_html = format_html('<img src="{}" class="logo" alt="Logo">', logo_uri)
        else:
            logo_html = mark_safe('<span style="font-size: 10pt;">[Logo placeholder]</span>')

        image_uri = assets.read_data_uri(assets.find_product_image(document.header))
        if image_uri:
            product_image_html = format_html(
                '<div class="product-image-container">'
                '<img src="{}" class="product-image" alt="Product"></div>',
                image_uri
            )
        else:
            product_image_html = ''

        return {
            'product_name': product_name(document),
            'logo_html': logo_html,
            'title': document.title,
            'code': document.code,
            'power_supply': document.power_supply,
            'product_image_html': product_image_html,
            'sections_html': self.render_sections(document),
            'footer_text': document.footer,
            'version_date': version_date(),
            'disclaimer': conf.get_disclaimer(),
        }

    def build_html(self, document: ParsedDocument, assets: AssetResolver, context: Optional[dict] = None) -> str:
        context = context or self.build_context(document, assets)
        logger.debug(f"Rendering template: {self.template_name}")
        return render_to_string(self.template_name, context)

    def build_footer_html(self, document: ParsedDocument, context: Optional[dict] = None) -> str:
        context = context or {
            'footer_text': document.footer,
            'version_date': version_date(),
            'disclaimer': conf.get_disclaimer(),
        }
        return render_to_string(self.footer_template_name, context)

    def render(self, document: ParsedDocument, assets: AssetResolver, sink: BinaryIO) -> None:
        try:
            context = self.build_context(document, assets)
            html = self.build_html(document, assets, context)
            footer_html = self.build_footer_html(document, context)

            base_url = assets.uploads_dir.resolve().as_uri()
            logger.debug(f"Converting HTML to PDF with base_url: {base_url}")
            pdf_bytes = self.engine.render_html_to_pdf(html, base_url, footer_html=footer_html)

            if not pdf_bytes or not pdf_bytes.startswith(PDF_MAGIC):
                raise RenderError("Print engine did not return a PDF document", backend=self.backend)

            sink.write(pdf_bytes)

        except RenderError:
            raise
        except Exception as e:
            logger.error(f"Failed to render data sheet as HTML: {e}", exc_info=True)
            raise RenderError(f"HTML rendering failed: {e}", backend=self.backend) from e

        logger.info(
            f"Successfully rendered data sheet {document.header!r} via HTML "
            f"({len(pdf_bytes)} bytes)"
        )

    def _get_default_engine(self) -> IPdfRenderer:
        """
        Get the default HTML-to-PDF engine.

        Returns:
            Default IPdfRenderer implementation (headless Chromium)
        """
        return ChromiumPdfRenderer()
