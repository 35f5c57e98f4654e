"""
Data Sheet Rendering

Two interchangeable PDF backends over one ParsedDocument:
- 'reportlab': direct vector drawing on a single page
- 'html': HTML template printed by headless Chromium
"""

from .dto import PdfResult
from .html_renderer import HtmlRenderer
from .interfaces import IDatasheetRenderer, IPdfRenderer
from .reportlab_renderer import ReportLabRenderer

__all__ = [
    'HtmlRenderer',
    'IDatasheetRenderer',
    'IPdfRenderer',
    'PdfResult',
    'ReportLabRenderer',
]
