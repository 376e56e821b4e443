"""
Configuration management using Mapping interfaces.

- ConfigStore: MutableMapping for configuration management
- Default configuration
- Loading (JSON or YAML) merged over the defaults
"""

import os
from typing import Any
from collections.abc import MutableMapping as ABCMutableMapping

from cvpress.util import _merge_dicts, load_mapping_file

DFLT_STORAGE_PATH = os.path.join(os.path.expanduser('~'), '.cvpress', 'storage.json')
DFLT_STORAGE_KEY = 'cvData'


class ConfigStore(ABCMutableMapping):
    """Configuration store with cascading defaults."""

    def __init__(self, base_config: dict | None = None):
        self._config = base_config or {}

    def __getitem__(self, key: str) -> Any:
        return self._config[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self._config[key] = value

    def __delitem__(self, key: str) -> None:
        del self._config[key]

    def __iter__(self):
        return iter(self._config)

    def __len__(self) -> int:
        return len(self._config)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._config!r})"


def _default_config_dict() -> dict:
    return {
        'template': 'classic',
        'format': 'html',
        'templates_dirs': [],
        'storage_path': DFLT_STORAGE_PATH,
        'storage_key': DFLT_STORAGE_KEY,
        'available_width': None,
        'print_cleanup_delay': 1.0,
    }


def get_default_config() -> ConfigStore:
    return ConfigStore(_default_config_dict())


def load_config(path: str) -> ConfigStore:
    """Load a JSON or YAML config file; missing keys take their default values."""
    return ConfigStore(_merge_dicts(_default_config_dict(), load_mapping_file(path)))


def ensure_config(config=None) -> ConfigStore:
    """A ConfigStore from None (defaults), a mapping (merged over defaults) or a path."""
    if isinstance(config, ConfigStore):
        return config
    if config is None:
        return get_default_config()
    if isinstance(config, str):
        return load_config(config)
    return ConfigStore(_merge_dicts(_default_config_dict(), dict(config)))
