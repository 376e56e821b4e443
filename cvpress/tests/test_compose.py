"""Tests for the preview page compositor."""

import pytest

from cvpress.compose import (
    CLASSIC_FONT_URL,
    FIXED,
    FLUID,
    compose,
    extract_body,
    extract_styles,
    preset_for,
    preview_scale,
)
from cvpress.cv_models import CVRecord, TemplateFamily
from cvpress.escaping import escape_html
from cvpress.populate import PopulatedCV, TemplatePopulator

DOC = """<html><head>
<style>.a { color: red; }</style>
<style media="print">.b { color: blue; }</style>
</head><body class="page"><div class="a">Ada</div></body></html>"""


def test_extract_styles_and_body():
    assert extract_styles(DOC) == '.a { color: red; }\n.b { color: blue; }'
    assert extract_body(DOC) == '<div class="a">Ada</div>'
    assert extract_body('<p>bare</p>') == '<p>bare</p>'
    assert extract_styles('<p>bare</p>') == ''


@pytest.mark.parametrize(
    'width, expected',
    [(None, 1), (612, 1), (1200, 1), (306, 0.5), (153, 0.25)],
)
def test_preview_scale(width, expected):
    assert preview_scale(width) == expected


def test_preset_for():
    assert preset_for(TemplateFamily.TIMELINE) == FLUID
    assert preset_for(TemplateFamily.TIMELINE, from_template=False) == FIXED
    assert preset_for(TemplateFamily.LIST) == FIXED
    assert preset_for(TemplateFamily.TYPESET) == FIXED


def test_fixed_page():
    page = compose(DOC, 'modern', available_width=306)
    assert page.preset == FIXED
    assert (page.width, page.height, page.scale) == (612, 792, 0.5)
    assert 'transform: scale(0.5)' in page.fragment
    assert 'padding: 24px' in page.fragment
    assert '.a { color: red; }' in page.fragment
    assert '<div id="cvPreview" class="cv-preview"><div class="a">Ada</div></div>' in page.fragment
    assert escape_html(CLASSIC_FONT_URL) not in page.fragment
    assert page.html.startswith('<!DOCTYPE html>')
    assert page.fragment in page.html


def test_full_width_page_is_not_scaled():
    page = compose(DOC, 'modern')
    assert page.scale == 1
    assert 'transform: scale' not in page.fragment


def test_classic_adds_font():
    page = compose(DOC, 'classic')
    assert f'href="{escape_html(CLASSIC_FONT_URL)}"' in page.fragment
    assert "'Latin Modern Roman'" in page.fragment


def test_timeline_page_is_fluid():
    page = compose(DOC, 'sidebar', container_id='box')
    assert page.preset == FLUID
    assert 'width: 210px' in page.fragment
    assert (
        '<div id="box" class="cv-preview"><div class="figma-body-wrapper">'
        '<div class="a">Ada</div></div></div>'
    ) in page.fragment


def test_builtin_fallback_for_timeline_is_fixed():
    populated = PopulatedCV('<div>Ada</div>', 'sidebar', TemplateFamily.LIST, False)
    assert compose(populated).preset == FIXED


def test_compose_populated_sidebar():
    record = CVRecord(template='sidebar', name='Ada', skills='Python')
    page = compose(TemplatePopulator().populate_cv(record))
    assert page.preset == FLUID
    assert 'class="sidebar"' in page.body
    assert '<li>Python</li>' in page.body
