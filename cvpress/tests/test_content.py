"""
Minimal unit tests for cvpress.content
"""

import json

import pytest

from cvpress.content import DictContentSource, FileContentSource, JSONTextContentSource


def test_dict_content_source():
    d = {'name': 'Ada'}
    src = DictContentSource(d)
    assert src.read() == d


def test_file_content_source_json(tmp_path):
    path = tmp_path / 'cv.json'
    path.write_text(json.dumps({'name': 'Ada'}))
    assert FileContentSource(str(path)).read() == {'name': 'Ada'}


def test_file_content_source_yaml(tmp_path):
    path = tmp_path / 'cv.yml'
    path.write_text('name: Ada\nskills: |\n  Python\n  SQL\n')
    data = FileContentSource(path).read()
    assert data['name'] == 'Ada'
    assert data['skills'] == 'Python\nSQL\n'


def test_file_content_source_unsupported(tmp_path):
    path = tmp_path / 'cv.txt'
    path.write_text('Ada')
    with pytest.raises(ValueError, match='Unsupported file type'):
        FileContentSource(str(path)).read()


def test_json_text_content_source():
    assert JSONTextContentSource('{"name": "Ada"}').read() == {'name': 'Ada'}
    with pytest.raises(ValueError):
        JSONTextContentSource('["not", "an", "object"]').read()
