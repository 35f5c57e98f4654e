"""
Chromium Renderer Implementation

Adapter for printing HTML to PDF with a headless Chromium driven by
Playwright. A fresh browser is launched for every call and closed before
the call returns or raises.
"""

from typing import Optional
import logging

try:
    from playwright.sync_api import sync_playwright
    PLAYWRIGHT_AVAILABLE = True
except ImportError:
    PLAYWRIGHT_AVAILABLE = False

from datasheets import conf
from datasheets.exceptions import BackendNotAvailable

from .interfaces import IPdfRenderer


logger = logging.getLogger(__name__)

PAGE_MARGINS = {
    'top': '12mm',
    'right': '15mm',
    'bottom': '22mm',
    'left': '15mm',
}

EMPTY_HEADER_TEMPLATE = '<span></span>'


class ChromiumPdfRenderer(IPdfRenderer):
    """
    PDF renderer using headless Chromium.

    Supports:
    - Print backgrounds (zebra shading)
    - Per-page footer with page number and total page count
    """

    def __init__(self, launch_args: Optional[list] = None, timeout_ms: Optional[int] = None):
        """
        Initialize the renderer.

        Args:
            launch_args: Chromium command line arguments
                (defaults to the DATASHEETS_BROWSER_ARGS setting)
            timeout_ms: Timeout for loading and printing
                (defaults to the DATASHEETS_BROWSER_TIMEOUT_MS setting)
        """
        self.launch_args = launch_args if launch_args is not None else conf.get_browser_args()
        self.timeout_ms = timeout_ms if timeout_ms is not None else conf.get_browser_timeout_ms()

    def _pdf_options(self, footer_html: Optional[str]) -> dict:
        options = {
            'format': 'A4',
            'print_background': True,
            'margin': PAGE_MARGINS,
        }
        if footer_html is not None:
            options.update(
                display_header_footer=True,
                header_template=EMPTY_HEADER_TEMPLATE,
                footer_template=footer_html,
            )
        return options

    def render_html_to_pdf(self, html: str, base_url: str, *, footer_html: Optional[str] = None) -> bytes:
        """
        Render HTML to PDF using a disposable Chromium instance.

        Args:
            html: HTML string to render
            base_url: Unused; images are expected inline as data URIs
            footer_html: Optional footer template; Chromium fills elements
                with the classes 'pageNumber' and 'totalPages'

        Returns:
            PDF content as bytes

        Raises:
            BackendNotAvailable: If Playwright is not installed
            Exception: If launching, loading or printing fails
        """
        if not PLAYWRIGHT_AVAILABLE:
            raise BackendNotAvailable(
                "Playwright is not installed. "
                "Install it with: pip install playwright && playwright install chromium",
                backend='html'
            )

        try:
            with sync_playwright() as playwright:
                browser = playwright.chromium.launch(headless=True, args=self.launch_args)
                try:
                    page = browser.new_page()
                    page.set_default_timeout(self.timeout_ms)
                    page.set_content(html, wait_until='domcontentloaded')
                    pdf_bytes = page.pdf(**self._pdf_options(footer_html))
                finally:
                    browser.close()

            logger.info(f"Successfully rendered PDF: {len(pdf_bytes)} bytes")
            return pdf_bytes

        except Exception as e:
            logger.error(f"Failed to render PDF: {e}", exc_info=True)
            raise
