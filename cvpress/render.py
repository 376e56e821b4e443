"""Rendering pipeline entry points.

* Pluggable renderer system (see `cvpress.base.RendererRegistry`).
* HTML preview pages and PDF print output via HTMLRenderer.
"""

from cvpress.base import (
    Renderer,
    get_renderer_registry,
)
from cvpress.renderers.html import HTMLRenderer


# Initialize and register default renderers
def _initialize_default_renderers():
    """Register built-in renderers with the global registry."""
    registry = get_renderer_registry()

    # One renderer class serves both formats
    registry.register('html', HTMLRenderer)
    registry.register('pdf', HTMLRenderer)


def _get_renderer_for_format(format: str) -> Renderer:
    """Get renderer for specified format from the registry."""
    registry = get_renderer_registry()

    # Initialize default renderers if registry is empty
    if not registry.list_formats():
        _initialize_default_renderers()

    try:
        return registry.get_renderer(format)
    except ValueError:
        raise NotImplementedError(f'Format {format} not supported')


# Initialize renderers when module is imported
_initialize_default_renderers()
