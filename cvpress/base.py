"""
Core protocols and rendering configuration for the cvpress package.

Define:
- ContentSource: Protocol for CV data sources
- Renderer: Protocol for CV renderers
- RendererRegistry: format name -> renderer class
- RenderingConfig: Configuration for one rendering call
"""

from typing import Protocol, Any
from collections.abc import Mapping
from dataclasses import dataclass, field

from cvpress.cv_models import CVRecord


class ContentSource(Protocol):
    """Protocol for sources that provide CV data."""

    def read(self) -> Mapping[str, Any]: ...


class Renderer(Protocol):
    """Protocol for CV renderers."""

    def render(self, content: CVRecord, config: 'RenderingConfig') -> bytes: ...


class RendererRegistry:
    """Output formats of a CV record, each mapped to the renderer class producing it.

    `cvpress.render` registers `HTMLRenderer` under both 'html' (the preview
    page) and 'pdf' (the printed document); plugins add more formats with
    `register_renderer`. Format names are case-insensitive. Formats served by
    the same class share one instance, so the html preview and the pdf print
    reuse the same populated-template caches.
    """

    def __init__(self):
        self._renderers: dict[str, type[Renderer]] = {}
        self._instances: dict[type, Renderer] = {}

    def register(self, format_name: str, renderer_class: type[Renderer]) -> None:
        """Map a format name to the renderer class producing it."""
        self._renderers[format_name.lower()] = renderer_class
        self._instances.pop(renderer_class, None)

    def get_renderer(self, format_name: str) -> Renderer:
        """Return the renderer instance for a format, creating it on first use."""
        renderer_class = self._renderers.get(format_name.lower())
        if renderer_class is None:
            known = ', '.join(sorted(self._renderers)) or 'none'
            raise ValueError(
                f"No renderer registered for format: {format_name} (known: {known})"
            )
        if renderer_class not in self._instances:
            self._instances[renderer_class] = renderer_class()
        return self._instances[renderer_class]

    def list_formats(self) -> list[str]:
        return list(self._renderers)

    def is_registered(self, format_name: str) -> bool:
        return format_name.lower() in self._renderers


# Process-wide registry that `cvpress.render` fills with the html and pdf formats
_renderer_registry = RendererRegistry()


def register_renderer(format_name: str):
    """Class decorator adding a renderer for `format_name` to the global registry.

    >>> @register_renderer('txt')  # doctest: +SKIP
    ... class TextRenderer:
    ...     def render(self, content, config):
    ...         return content.name.encode()
    """

    def decorator(renderer_class: type[Renderer]):
        _renderer_registry.register(format_name, renderer_class)
        return renderer_class

    return decorator


def get_renderer_registry() -> RendererRegistry:
    """The registry `mk_cv` looks output formats up in."""
    return _renderer_registry


@dataclass
class RenderingConfig:
    """Configuration for CV rendering.

    `template` overrides the record's own template choice when set.
    """

    format: str = 'html'  # html, pdf
    template: str | None = None
    available_width: float | None = None
    custom_css: str | None = None
    templates_dirs: list[str] = field(default_factory=list)
    print_cleanup_delay: float = 1.0
