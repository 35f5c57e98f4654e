"""
Tests for the renderer registry
"""

from django.test import SimpleTestCase

from datasheets.rendering import registry
from datasheets.rendering.html_renderer import HtmlRenderer
from datasheets.rendering.registry import RendererRegistry
from datasheets.rendering.reportlab_renderer import ReportLabRenderer


class RendererRegistryTestCase(SimpleTestCase):
    """Test cases for RendererRegistry"""

    def setUp(self):
        self.registry = RendererRegistry()

    def test_register_and_get(self):
        self.registry.register('reportlab', ReportLabRenderer)

        renderer = self.registry.get_renderer('reportlab')

        self.assertIsInstance(renderer, ReportLabRenderer)
        self.assertTrue(self.registry.is_registered('reportlab'))

    def test_get_returns_fresh_instance(self):
        self.registry.register('reportlab', ReportLabRenderer)

        self.assertIsNot(
            self.registry.get_renderer('reportlab'),
            self.registry.get_renderer('reportlab')
        )

    def test_duplicate_registration_rejected(self):
        self.registry.register('reportlab', ReportLabRenderer)

        with self.assertRaises(ValueError) as cm:
            self.registry.register('reportlab', ReportLabRenderer)

        self.assertIn('already registered', str(cm.exception))

    def test_unknown_backend(self):
        with self.assertRaises(KeyError):
            self.registry.get_renderer('svg')
        self.assertFalse(self.registry.is_registered('svg'))

    def test_list_renderers(self):
        self.registry.register('a', ReportLabRenderer)
        self.registry.register('b', ReportLabRenderer)

        self.assertEqual(self.registry.list_renderers(), ['a', 'b'])


class DefaultRegistryTestCase(SimpleTestCase):
    """Test the global registry"""

    def test_both_backends_registered(self):
        self.assertEqual(registry.list_renderers(), ['reportlab', 'html'])

    def test_get_default_backends(self):
        self.assertIsInstance(registry.get_renderer('reportlab'), ReportLabRenderer)
        self.assertIsInstance(registry.get_renderer('html'), HtmlRenderer)

    def test_global_registry_rejects_duplicates(self):
        with self.assertRaises(ValueError):
            registry.register_renderer('html', HtmlRenderer)

    def test_get_default_registry(self):
        self.assertIs(registry.get_default_registry(), registry._registry)
        self.assertTrue(registry.is_registered('html'))
