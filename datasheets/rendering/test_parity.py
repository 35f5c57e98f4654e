"""
Tests that both backends show the same section content in the same order
"""

import re
import tempfile
from html import unescape
from io import BytesIO
from pathlib import Path

from django.test import SimpleTestCase

from datasheets.assets import AssetResolver
from datasheets.document import ParsedDocument, Section, SectionKind
from datasheets.formatting import document_views
from datasheets.parser import parse
from datasheets.rendering.html_renderer import HtmlRenderer
from datasheets.rendering.reportlab_renderer import ReportLabRenderer

from .test_html_renderer import FakePdfEngine
from .test_reportlab_renderer import SAMPLE_ROWS


PDF_TEXT = re.compile(rb'\((.*?)\) Tj')
HTML_SECTION_TEXT = re.compile(r'<(?:li|td|th|div class="subtitle")>([^<]*)</')


def is_subsequence(needle, haystack) -> bool:
    remaining = iter(haystack)
    return all(any(item == candidate for candidate in remaining) for item in needle)


class BackendParityTestCase(SimpleTestCase):
    """Both renderers draw exactly the texts of the section views"""

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.assets = AssetResolver(Path(self._tmp.name))
        self.document = parse(SAMPLE_ROWS)
        self.expected = [
            text
            for view in document_views(self.document)
            for text in view.texts()
        ]

    def tearDown(self):
        self._tmp.cleanup()

    def _html_texts(self) -> list[str]:
        html = HtmlRenderer(engine=FakePdfEngine()).build_html(self.document, self.assets)
        sections_html = html[html.index('<div class="sections">'):]
        return [unescape(text) for text in HTML_SECTION_TEXT.findall(sections_html)]

    def _pdf_texts(self) -> list[str]:
        sink = BytesIO()
        ReportLabRenderer(compress=False).render(self.document, self.assets, sink)
        return [text.decode('latin-1') for text in PDF_TEXT.findall(sink.getvalue())]

    def test_expected_texts(self):
        self.assertEqual(self.expected, [
            'Features', 'Compact housing', 'Silent fan',
            'Specifications', 'Weight', '2 kg', 'Housing', 'Aluminium',
            'Ratings', 'Model', 'Power', 'Efficiency',
            'X1', '60', '50 %', 'X2', '90', '87 %',
        ])

    def test_html_shows_section_texts_in_order(self):
        self.assertEqual(self._html_texts(), self.expected)

    def test_pdf_draws_section_texts_in_order(self):
        self.assertTrue(is_subsequence(self.expected, self._pdf_texts()))

    def test_empty_sections_are_skipped_by_both_backends(self):
        self.document = ParsedDocument(sections=(
            Section(SectionKind.LIST, 'Notes', ()),
            Section(SectionKind.ZEBRA_TABLE, 'Ratings', (('', None),)),
            Section(SectionKind.LIST, 'Kept', ('A',)),
        ))

        html_texts = self._html_texts()
        pdf_texts = self._pdf_texts()

        self.assertEqual(html_texts, ['Kept', 'A'])
        self.assertTrue(is_subsequence(['Kept', 'A'], pdf_texts))
        for subtitle in ['Notes', 'Ratings']:
            self.assertNotIn(subtitle, pdf_texts)
