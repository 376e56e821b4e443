"""
CV content sources: files, dicts and JSON text.
"""

import json
from typing import Any
from collections.abc import Mapping

from cvpress.util import load_mapping_file


class FileContentSource:
    """Implements ContentSource for file-based data (.json, .yaml, .yml)."""

    def __init__(self, path: str):
        self._path = str(path)

    def read(self) -> Mapping[str, Any]:
        return load_mapping_file(self._path)


class DictContentSource:
    """Implements ContentSource for dictionary data."""

    def __init__(self, data: Mapping[str, Any]):
        self._data = data

    def read(self) -> Mapping[str, Any]:
        return self._data


class JSONTextContentSource:
    """Implements ContentSource for a JSON document held in a string."""

    def __init__(self, text: str):
        self._text = text

    def read(self) -> Mapping[str, Any]:
        data = json.loads(self._text)
        if not isinstance(data, Mapping):
            raise ValueError('A CV document must be a JSON object')
        return data
