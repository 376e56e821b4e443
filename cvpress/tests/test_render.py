"""
Minimal unit tests for cvpress.renderers.html and cvpress.tools
"""

import pytest

from cvpress import printing
from cvpress.base import RenderingConfig
from cvpress.cv_models import CVRecord, EducationEntry
from cvpress.renderers.html import HTMLRenderer
from cvpress.tools import ensure_cv_record, mk_cv, preview_cv
from cvpress.util import cv_json_example


@pytest.fixture
def record():
    return CVRecord(
        template='classic',
        name='A',
        email='a@example.com',
        education=[
            EducationEntry(
                university='MIT', degree='BSc', dateStart='2018-09', dateEnd='2022-05'
            )
        ],
    )


def test_html_renderer_html(record):
    html = HTMLRenderer().render(record, RenderingConfig(format='html'))
    assert b'<html' in html
    assert b'September 2018 - May 2022' in html
    assert b'Thesis' not in html


def test_html_renderer_custom_css(record):
    config = RenderingConfig(custom_css='.cv-name { color: red; }')
    html = HTMLRenderer().render(record, config).decode('utf-8')
    assert '<style>.cv-name { color: red; }</style>\n</head>' in html


def test_html_renderer_pdf(monkeypatch, record):
    monkeypatch.setattr(printing, 'weasyprint', None)
    config = RenderingConfig(format='pdf', print_cleanup_delay=0)
    pdf = HTMLRenderer().render(record, config)
    assert pdf.startswith(b'%PDF')


def test_template_override(record):
    page = HTMLRenderer().compose_page(record, RenderingConfig(template='sidebar'))
    assert page.preset == 'fluid'
    assert 'timeline-item' in page.body


def test_populators_are_reused():
    renderer = HTMLRenderer()
    config = RenderingConfig()
    assert renderer.populator_for(config) is renderer.populator_for(RenderingConfig())


def test_ensure_cv_record():
    assert ensure_cv_record({'name': 'Ada'}).name == 'Ada'
    assert ensure_cv_record('{"name": "Ada"}').name == 'Ada'
    assert ensure_cv_record(str(cv_json_example)).name == 'Ada Lovelace'
    record = CVRecord(name='Ada')
    assert ensure_cv_record(record) is record
    with pytest.raises(ValueError):
        ensure_cv_record('{"name": ')


def test_mk_cv_writes_output(tmp_path, record):
    out = tmp_path / 'cv.html'
    html = mk_cv(record, {'format': 'html'}, output_path=out)
    assert out.read_bytes() == html


def test_mk_cv_unknown_format(record):
    with pytest.raises(NotImplementedError):
        mk_cv(record, {'format': 'docx'})


def test_preview_cv(record):
    page = preview_cv(record, available_width=306)
    assert page.scale == 0.5
    assert 'MIT' in page.body
    assert page.preset == 'fixed'
