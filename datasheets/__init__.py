"""
Product Data Sheets

Turns tag-annotated spreadsheet rows into a product data sheet document
and renders it to PDF with ReportLab or with an HTML template printed by
headless Chromium.
"""

from .document import ParsedDocument, Section, SectionKind
from .parser import parse

__all__ = [
    'ParsedDocument',
    'Section',
    'SectionKind',
    'parse',
]
