"""
Persistence of the working CV record, and JSON import/export.

`JSONFileStorage` plays the part of browser local storage: a flat key/value
store of text, kept in one JSON file. `CVStore` holds the working record,
reloads it once at construction and writes it back after every mutation.
"""

import json
import os
from collections.abc import Mapping
from numbers import Number
from typing import Any

from pydantic import ValidationError

from cvpress.config import DFLT_STORAGE_KEY, DFLT_STORAGE_PATH
from cvpress.cv_models import (
    ENTRY_MODELS,
    PAGE_OPTION_FIELDS,
    TEXT_FIELDS,
    CVRecord,
    default_record,
)
from cvpress.exceptions import CVImportError
from cvpress.logger import log_debug, log_warning
from cvpress.util import get_jsonschema_errors, validation_friendly_errors_string

EXPORT_FILENAME = 'cv-data.json'


class JSONFileStorage:
    """Key/value text storage backed by a single JSON file."""

    def __init__(self, path: str = DFLT_STORAGE_PATH):
        self.path = os.path.expanduser(str(path))

    def _read_all(self) -> dict:
        if not os.path.exists(self.path):
            return {}
        with open(self.path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        return data if isinstance(data, dict) else {}

    def get(self, key: str) -> str | None:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        try:
            data = self._read_all()
        except (OSError, ValueError):
            data = {}
        data[key] = value
        os.makedirs(os.path.dirname(self.path) or '.', exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump(data, f)


def export_json(record: CVRecord) -> str:
    """The record as a pretty-printed JSON document (wire-format field names)."""
    return json.dumps(record.model_dump(mode='json'), indent=2, ensure_ascii=False)


def _is_text(value) -> bool:
    return isinstance(value, str) or (
        isinstance(value, Number) and not isinstance(value, bool)
    )


def _clean_entry(entry: Mapping) -> dict:
    return {k: v for k, v in entry.items() if v is None or _is_text(v)}


def _sanitize(data: Mapping[str, Any]) -> dict:
    """Keep only values of the right shape; anything else takes its default."""
    clean = {}
    template = data.get('template')
    if isinstance(template, str) and template:
        clean['template'] = template
    for name in TEXT_FIELDS:
        if _is_text(data.get(name)):
            clean[name] = data[name]
    for name in ENTRY_MODELS:
        entries = data.get(name)
        if isinstance(entries, list):
            clean[name] = [_clean_entry(e) for e in entries if isinstance(e, Mapping)]
    margin = data.get('margin')
    if (
        isinstance(margin, list)
        and len(margin) == 4
        and all(_is_text(m) and not isinstance(m, str) for m in margin)
    ):
        clean['margin'] = margin
    for name in ('paperSize', 'orientation'):
        if isinstance(data.get(name), str) and data[name]:
            clean[name] = data[name]
    return clean


def record_from_mapping(data: Mapping[str, Any]) -> CVRecord:
    """Merge `data` over a blank record."""
    merged = default_record().model_dump()
    merged.update(_sanitize(data))
    try:
        return CVRecord.model_validate(merged)
    except ValidationError as e:
        raise CVImportError(
            f"Error loading JSON file: {validation_friendly_errors_string(e)}"
        ) from e


def get_import_warnings(data: Mapping[str, Any]) -> list[str]:
    """Schema drift in an import document. Reported only, never blocks an import."""
    return get_jsonschema_errors(data)


def import_json(text: str) -> CVRecord:
    """Parse an exported document back into a record.

    Raises:
        CVImportError: if `text` is not a JSON object.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise CVImportError(f"Error loading JSON file: {e}") from e
    if not isinstance(data, dict):
        raise CVImportError('Error loading JSON file: expected a JSON object')
    for warning in get_import_warnings(data):
        log_warning(f"Import: {warning}")
    return record_from_mapping(data)


class CVStore:
    """The working CV record, persisted after every change."""

    def __init__(self, storage: JSONFileStorage | None = None, key: str = DFLT_STORAGE_KEY):
        self.storage = storage or JSONFileStorage()
        self.key = key
        self._data = self.load()

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> 'CVStore':
        return cls(JSONFileStorage(config['storage_path']), config['storage_key'])

    def load(self) -> CVRecord:
        """The stored record, or a blank one if nothing (readable) is stored."""
        try:
            raw = self.storage.get(self.key)
            if not raw:
                return default_record()
            parsed = json.loads(raw)
            if not isinstance(parsed, dict):
                raise ValueError('stored CV is not a JSON object')
            return record_from_mapping(parsed)
        except (OSError, ValueError, CVImportError) as e:
            log_warning(f"Ignoring unreadable stored CV: {e}")
            return default_record()

    def save(self) -> None:
        self.storage.set(self.key, json.dumps(self._data.model_dump(mode='json')))
        log_debug(f"Saved CV to {self.key!r}")

    @property
    def data(self) -> CVRecord:
        return self._data

    def set_personal(self, field: str, value) -> None:
        """Set a top-level field through validation.

        None becomes the field default and numbers become text. Unknown field
        names and values of the wrong shape are ignored with a warning.
        """
        if field not in CVRecord.model_fields:
            log_warning(f"Unknown field: {field}")
            return
        self._update({field: value})

    def _update(self, changes: dict) -> None:
        try:
            self._data = CVRecord.model_validate({**self._data.model_dump(), **changes})
        except ValidationError as e:
            log_warning(f"Ignoring invalid update: {validation_friendly_errors_string(e)}")
            return
        self.save()

    def _add(self, section: str, entry=None) -> None:
        model = ENTRY_MODELS[section]
        if entry is None:
            entry = model()
        elif not isinstance(entry, model):
            entry = model.model_validate(dict(entry))
        entries = [*getattr(self._data, section), entry]
        self._data = self._data.model_copy(update={section: entries})
        self.save()

    def _remove(self, section: str, index: int) -> None:
        entries = list(getattr(self._data, section))
        del entries[index]
        self._data = self._data.model_copy(update={section: entries})
        self.save()

    def add_education(self, entry=None) -> None:
        self._add('education', entry)

    def remove_education(self, index: int) -> None:
        self._remove('education', index)

    def add_experience(self, entry=None) -> None:
        self._add('experience', entry)

    def remove_experience(self, index: int) -> None:
        self._remove('experience', index)

    def add_volunteer(self, entry=None) -> None:
        self._add('volunteer', entry)

    def remove_volunteer(self, index: int) -> None:
        self._remove('volunteer', index)

    def add_language(self, entry=None) -> None:
        self._add('languages', entry)

    def remove_language(self, index: int) -> None:
        self._remove('languages', index)

    def add_project(self, entry=None) -> None:
        self._add('projects', entry)

    def remove_project(self, index: int) -> None:
        self._remove('projects', index)

    def update_page_options(self, *, margin=None, paperSize=None, orientation=None) -> None:
        """Set the given page options; options left as None keep their value."""
        given = dict(margin=margin, paperSize=paperSize, orientation=orientation)
        update = {k: v for k, v in given.items() if k in PAGE_OPTION_FIELDS and v}
        if update:
            self._update(update)

    def reset(self) -> None:
        self._data = default_record()
        self.save()

    def load_json(self, text: str) -> CVRecord:
        """Replace the working record with an imported document.

        The store is left untouched when the document cannot be parsed.
        """
        self._data = import_json(text)
        self.save()
        return self._data

    def export_json(self) -> str:
        return export_json(self._data)
