"""Tests for the cvpress command line interface."""

import json
import sys

import pytest
from loguru import logger
from typer.testing import CliRunner

from cvpress import printing
from cvpress.__main__ import app
from cvpress.util import cv_json_example

runner = CliRunner()


@pytest.fixture(autouse=True)
def restore_logger():
    yield
    # the CLI installs a sink on the runner's (now closed) stderr
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / 'config.json'
    path.write_text(
        json.dumps({
            'storage_path': str(tmp_path / 'storage.json'),
            'print_cleanup_delay': 0,
        }),
        encoding='utf-8',
    )
    return str(path)


@pytest.fixture
def fake_weasyprint(monkeypatch):
    class HTML:
        def __init__(self, string):
            self.string = string

        def write_pdf(self, stylesheets=None, **kwargs):
            return b'%PDF-fake'

    class CSS:
        def __init__(self, string):
            self.string = string

    monkeypatch.setattr(printing, 'weasyprint', type('W', (), {'HTML': HTML, 'CSS': CSS}))


def test_no_command_shows_help():
    result = runner.invoke(app, [])
    assert result.exit_code == 0
    assert 'render' in result.output


def test_render_to_stdout():
    result = runner.invoke(app, ['render', str(cv_json_example)])
    assert result.exit_code == 0, result.output
    assert '<!DOCTYPE html>' in result.output
    assert 'Ada Lovelace' in result.output


def test_render_to_file(tmp_path):
    out = tmp_path / 'preview.html'
    result = runner.invoke(
        app, ['render', str(cv_json_example), '-t', 'modern', '--width', '306', '-o', str(out)]
    )
    assert result.exit_code == 0, result.output
    html = out.read_text(encoding='utf-8')
    assert 'transform: scale(0.5)' in html
    assert 'Ada Lovelace' in html


def test_render_with_templates_dir(tmp_path):
    (tmp_path / 'plain.html').write_text('<body><p>Hello {{name}}</p></body>', encoding='utf-8')
    result = runner.invoke(
        app,
        ['render', str(cv_json_example), '-t', 'plain', '--templates-dir', str(tmp_path)],
    )
    assert result.exit_code == 0, result.output
    assert '<p>Hello Ada Lovelace</p>' in result.output


def test_render_pdf_needs_output():
    result = runner.invoke(app, ['render', str(cv_json_example), '-f', 'pdf'])
    assert result.exit_code == 1


def test_render_missing_source(tmp_path):
    result = runner.invoke(app, ['render', str(tmp_path / 'nope.json')])
    assert result.exit_code == 1


def test_print(tmp_path, config_file, fake_weasyprint):
    out = tmp_path / 'cv.pdf'
    result = runner.invoke(
        app, ['--config', config_file, 'print', str(cv_json_example), '-o', str(out)]
    )
    assert result.exit_code == 0, result.output
    assert out.read_bytes() == b'%PDF-fake'


def test_import_then_export(tmp_path, config_file):
    result = runner.invoke(app, ['--config', config_file, 'import', str(cv_json_example)])
    assert result.exit_code == 0, result.output
    assert 'Ada Lovelace' in result.output

    out = tmp_path / 'cv-data.json'
    result = runner.invoke(app, ['--config', config_file, 'export', '-o', str(out)])
    assert result.exit_code == 0, result.output
    assert json.loads(out.read_text(encoding='utf-8'))['name'] == 'Ada Lovelace'


def test_import_invalid_document(tmp_path, config_file):
    bad = tmp_path / 'bad.json'
    bad.write_text('{"name": ', encoding='utf-8')
    result = runner.invoke(app, ['--config', config_file, 'import', str(bad)])
    assert result.exit_code == 1
    assert not (tmp_path / 'storage.json').exists()


def test_templates_listing():
    result = runner.invoke(app, ['templates'])
    assert result.exit_code == 0, result.output
    lines = {line.split()[0]: line for line in result.output.splitlines() if line.strip()}
    assert 'typeset' in lines['academic']
    assert 'timeline' in lines['sidebar']
    assert lines['minimal'].endswith('[built-in]')


def test_export_yaml(tmp_path, config_file):
    runner.invoke(app, ['--config', config_file, 'import', str(cv_json_example)])
    out = tmp_path / 'cv.yaml'
    result = runner.invoke(app, ['--config', config_file, 'export', '-o', str(out)])
    assert result.exit_code == 0, result.output
    text = out.read_text(encoding='utf-8')
    assert text.startswith('template: classic\nname: Ada Lovelace\n')


def test_render_malformed_yaml_source(tmp_path):
    source = tmp_path / 'cv.yaml'
    source.write_text('name: [Ada\n', encoding='utf-8')
    result = runner.invoke(app, ['render', str(source)])
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
