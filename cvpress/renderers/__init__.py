"""
Renderer implementations package.
Contains the renderer backends for the supported output formats.
"""

from .html import HTMLRenderer

__all__ = ['HTMLRenderer']
