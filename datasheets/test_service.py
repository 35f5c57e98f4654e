"""
Tests for DatasheetService
"""

import tempfile
from io import BytesIO
from pathlib import Path

from django.test import SimpleTestCase, override_settings

from datasheets.document import ParsedDocument
from datasheets.exceptions import RenderError
from datasheets.rendering.dto import PdfResult
from datasheets.rendering.interfaces import IDatasheetRenderer
from datasheets.rendering.registry import RendererRegistry
from datasheets.service import DatasheetService


class RecordingRenderer(IDatasheetRenderer):
    """Writes a marker PDF and remembers what it was given."""

    backend = 'recording'
    calls = []

    def render(self, document, assets, sink):
        RecordingRenderer.calls.append((document, assets))
        sink.write(b'%PDF-recorded')


class FailingRenderer(IDatasheetRenderer):
    backend = 'failing'

    def render(self, document, assets, sink):
        sink.write(b'%PDF-partial')
        raise RenderError('boom', backend=self.backend)


SAMPLE_ROWS = [['_header_'], ['Acme X1 Pro'], ['_list_'], ['Fast']]


class DatasheetServiceTestCase(SimpleTestCase):
    """Test cases for DatasheetService"""

    def setUp(self):
        RecordingRenderer.calls = []
        self.registry = RendererRegistry()
        self.registry.register('recording', RecordingRenderer)
        self.registry.register('failing', FailingRenderer)
        self._tmp = tempfile.TemporaryDirectory()
        self.service = DatasheetService(registry=self.registry, uploads_dir=self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def test_default_registry(self):
        service = DatasheetService()
        self.assertTrue(service.registry.is_registered('reportlab'))
        self.assertTrue(service.registry.is_registered('html'))

    def test_render_parses_rows(self):
        sink = BytesIO()

        document = self.service.render(SAMPLE_ROWS, sink, backend='recording')

        self.assertEqual(document.header, 'Acme X1 Pro')
        self.assertEqual(sink.getvalue(), b'%PDF-recorded')
        rendered, assets = RecordingRenderer.calls[0]
        self.assertIs(rendered, document)
        self.assertEqual(assets.uploads_dir, Path(self._tmp.name))

    def test_render_accepts_parsed_document(self):
        document = ParsedDocument(header='Ready')

        result = self.service.render(document, BytesIO(), backend='recording')

        self.assertIs(result, document)

    @override_settings(DATASHEETS_DEFAULT_BACKEND='recording')
    def test_default_backend_setting(self):
        self.service.render(SAMPLE_ROWS, BytesIO())
        self.assertEqual(len(RecordingRenderer.calls), 1)

    def test_unknown_backend(self):
        with self.assertRaises(KeyError):
            self.service.render(SAMPLE_ROWS, BytesIO(), backend='svg')

    def test_render_error_propagates(self):
        with self.assertRaises(RenderError):
            self.service.render(SAMPLE_ROWS, BytesIO(), backend='failing')

    def test_render_to_pdf(self):
        result = self.service.render_to_pdf(SAMPLE_ROWS, backend='recording')

        self.assertIsInstance(result, PdfResult)
        self.assertEqual(result.pdf_bytes, b'%PDF-recorded')
        self.assertEqual(result.filename, 'acme-x1-pro.pdf')
        self.assertEqual(result.backend, 'recording')
        self.assertEqual(result.content_type, 'application/pdf')
        self.assertEqual(len(result), len(b'%PDF-recorded'))

    def test_render_to_pdf_custom_filename(self):
        result = self.service.render_to_pdf(SAMPLE_ROWS, backend='recording', filename='sheet.pdf')
        self.assertEqual(result.filename, 'sheet.pdf')

    def test_get_filename(self):
        self.assertEqual(DatasheetService.get_filename(ParsedDocument(header='Acme X1 / Pro')), 'acme-x1-pro.pdf')
        self.assertEqual(DatasheetService.get_filename(ParsedDocument()), 'datasheet.pdf')
        self.assertEqual(DatasheetService.get_filename(ParsedDocument(header='***')), 'datasheet.pdf')

    def test_reportlab_end_to_end(self):
        service = DatasheetService(uploads_dir=self._tmp.name)

        result = service.render_to_pdf(SAMPLE_ROWS, backend='reportlab')

        self.assertTrue(result.pdf_bytes.startswith(b'%PDF'))
        self.assertEqual(result.backend, 'reportlab')

    def test_calls_are_independent(self):
        first = self.service.render_to_pdf(SAMPLE_ROWS, backend='recording')
        second = self.service.render_to_pdf([['_header_'], ['Other']], backend='recording')

        self.assertEqual(first.filename, 'acme-x1-pro.pdf')
        self.assertEqual(second.filename, 'other.pdf')
        self.assertEqual(second.pdf_bytes, b'%PDF-recorded')


class AsyncDatasheetServiceTestCase(SimpleTestCase):
    """Test the async entry points"""

    def setUp(self):
        RecordingRenderer.calls = []
        registry = RendererRegistry()
        registry.register('recording', RecordingRenderer)
        registry.register('failing', FailingRenderer)
        self.service = DatasheetService(registry=registry)

    async def test_arender(self):
        sink = BytesIO()

        document = await self.service.arender(SAMPLE_ROWS, sink, backend='recording')

        self.assertEqual(document.header, 'Acme X1 Pro')
        self.assertEqual(sink.getvalue(), b'%PDF-recorded')

    async def test_arender_to_pdf(self):
        result = await self.service.arender_to_pdf(SAMPLE_ROWS, backend='recording')

        self.assertEqual(result.filename, 'acme-x1-pro.pdf')
        self.assertEqual(result.pdf_bytes, b'%PDF-recorded')

    async def test_arender_error_propagates(self):
        with self.assertRaises(RenderError):
            await self.service.arender(SAMPLE_ROWS, BytesIO(), backend='failing')
