"""
Renderer Registry

Central registry for resolving backend keys to renderer implementations.
"""

from typing import Callable

from .interfaces import IDatasheetRenderer


class RendererRegistry:
    """Registry for data sheet renderers"""

    def __init__(self):
        self._renderers: dict[str, Callable[[], IDatasheetRenderer]] = {}

    def register(self, backend: str, renderer_factory: Callable[[], IDatasheetRenderer]) -> None:
        """
        Register a renderer.

        Args:
            backend: Unique backend key (e.g., 'reportlab')
            renderer_factory: Factory function that returns a renderer instance
        """
        if backend in self._renderers:
            raise ValueError(f"Renderer '{backend}' is already registered")
        self._renderers[backend] = renderer_factory

    def get_renderer(self, backend: str) -> IDatasheetRenderer:
        """
        Get a renderer by its backend key.

        Raises:
            KeyError: If the backend is not registered
        """
        if backend not in self._renderers:
            raise KeyError(f"Renderer '{backend}' not found")
        return self._renderers[backend]()

    def is_registered(self, backend: str) -> bool:
        """Check if a backend is registered"""
        return backend in self._renderers

    def list_renderers(self) -> list[str]:
        """List all registered backend keys"""
        return list(self._renderers.keys())


def _build_default_registry() -> RendererRegistry:
    from .html_renderer import HtmlRenderer
    from .reportlab_renderer import ReportLabRenderer

    registry = RendererRegistry()
    registry.register(ReportLabRenderer.backend, ReportLabRenderer)
    registry.register(HtmlRenderer.backend, HtmlRenderer)
    return registry


# Global registry instance
_registry = _build_default_registry()


def register_renderer(backend: str, renderer_factory: Callable[[], IDatasheetRenderer]) -> None:
    """Register a renderer in the global registry"""
    _registry.register(backend, renderer_factory)


def get_renderer(backend: str) -> IDatasheetRenderer:
    """Get a renderer from the global registry"""
    return _registry.get_renderer(backend)


def is_registered(backend: str) -> bool:
    """Check if a backend is registered"""
    return _registry.is_registered(backend)


def list_renderers() -> list[str]:
    """List all registered backend keys"""
    return _registry.list_renderers()


def get_default_registry() -> RendererRegistry:
    return _registry
