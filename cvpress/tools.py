"""
High-level orchestration functions - the main API.

These are the primary user-facing functions that coordinate
the entire pipeline.
"""

import json
from typing import Any, Union
from collections.abc import Mapping
from pathlib import Path

from cvpress.base import RenderingConfig, ContentSource
from cvpress.compose import ComposedPage
from cvpress.content import DictContentSource, FileContentSource, JSONTextContentSource
from cvpress.cv_models import CVRecord
from cvpress.render import _get_renderer_for_format
from cvpress.renderers.html import HTMLRenderer
from cvpress.store import record_from_mapping

CVSource = Union[CVRecord, ContentSource, Mapping, str, Path]


def _to_source(src) -> ContentSource:
    if isinstance(src, Path):
        return FileContentSource(str(src.expanduser()))
    if isinstance(src, Mapping):
        return DictContentSource(src)
    if isinstance(src, str):
        if src.lstrip().startswith('{'):
            return JSONTextContentSource(src)
        return FileContentSource(src)
    if hasattr(src, 'read'):
        return src
    raise TypeError(f"Content source must be a record, dict, JSON string or filename: {src!r}")


def ensure_cv_record(src: CVSource) -> CVRecord:
    """
    Get a CVRecord from various sources.

    Accepts a record, a mapping, a JSON document string, a path to a
    ``.json``/``.yaml`` file, or any object with a ``read()`` method returning
    a mapping. Missing fields take their defaults.

    >>> ensure_cv_record({'name': 'Ada'}).name
    'Ada'
    >>> ensure_cv_record('{"name": "Ada", "education": "oops"}').education
    []
    """
    if isinstance(src, CVRecord):
        return src
    try:
        data = _to_source(src).read()
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON content provided: {e}") from e
    if not isinstance(data, Mapping):
        raise ValueError(f"A CV document must be a mapping, not {type(data).__name__}")
    return record_from_mapping(data)


def _ensure_rendering(rendering: Union[RenderingConfig, dict, None]) -> RenderingConfig:
    if rendering is None:
        return RenderingConfig()
    if isinstance(rendering, dict):
        return RenderingConfig(**rendering)
    return rendering


def mk_cv(
    content: CVSource,
    rendering: Union[RenderingConfig, dict, None] = None,
    *,
    output_path: Union[str, Path, None] = None,
) -> bytes:
    """
    Render a CV to its final format (``html`` preview page or ``pdf``).

    >>> html = mk_cv({'name': 'Ada', 'template': 'minimal'})
    >>> b'Ada' in html
    True
    """
    record = ensure_cv_record(content)
    rendering = _ensure_rendering(rendering)
    renderer = _get_renderer_for_format(rendering.format)
    result = renderer.render(record, rendering)
    if output_path:
        with open(output_path, 'wb') as f:
            f.write(result)
    return result


def preview_cv(
    content: CVSource,
    rendering: Union[RenderingConfig, dict, None] = None,
    **rendering_kwargs: Any,
) -> ComposedPage:
    """The composed preview page for a CV, with its styles, body and scale."""
    record = ensure_cv_record(content)
    rendering = _ensure_rendering(rendering)
    for k, v in rendering_kwargs.items():
        setattr(rendering, k, v)
    renderer = _get_renderer_for_format('html')
    if not isinstance(renderer, HTMLRenderer):
        renderer = HTMLRenderer()
    return renderer.compose_page(record, rendering)
