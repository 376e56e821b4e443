"""
Minimal unit tests for cvpress.util
"""

import json
import tempfile
import os

from cvpress.util import (
    _load_json_file,
    _merge_dicts,
    cv_json_example,
    cv_json_schema,
    dump_yaml,
    get_jsonschema_errors,
    load_yaml,
)


def test_merge_dicts():
    a = {'x': 1, 'y': 2}
    b = {'y': 3, 'z': 4}
    merged = _merge_dicts(a, b)
    assert merged['x'] == 1
    assert merged['y'] == 3
    assert merged['z'] == 4


def test_load_json_file():
    d = {'foo': 'bar'}
    with tempfile.NamedTemporaryFile('w+', delete=False) as f:
        json.dump(d, f)
        f.close()
        loaded = _load_json_file(f.name)
    os.unlink(f.name)
    assert loaded == d


def test_yaml_round_trip_keeps_order(tmp_path):
    path = str(tmp_path / 'x.yaml')
    dump_yaml({'name': 'Ada', 'about': 'x', 'awards': ''}, path)
    assert list(load_yaml(path)) == ['name', 'about', 'awards']


def test_cv_json_schema_lists_wire_fields():
    schema = cv_json_schema()
    props = schema['properties']
    for name in ('name', 'cityOfBirth', 'education', 'paperSize'):
        assert name in props


def test_get_jsonschema_errors():
    assert get_jsonschema_errors({'name': 'Ada', 'education': []}) == []
    errors = get_jsonschema_errors({'name': ['not', 'text'], 'education': 'oops'})
    assert any(e.startswith('name:') for e in errors)
    assert any(e.startswith('education:') for e in errors)


def test_packaged_example_is_valid():
    data = json.loads(cv_json_example.read_text(encoding='utf-8'))
    assert data['name'] == 'Ada Lovelace'
    assert get_jsonschema_errors(data) == []
