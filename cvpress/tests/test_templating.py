"""Tests for the placeholder template engine."""

import pytest

from cvpress.escaping import escape_html, escape_latex
from cvpress.exceptions import TemplateSyntaxError
from cvpress.templating import (
    TYPESET,
    Conditional,
    Placeholder,
    SubstitutionContext,
    Text,
    parse_template,
    render_template,
)


def _ctx(scalars=None, generators=None, escape=escape_html):
    return SubstitutionContext(scalars or {}, generators or {}, escape)


def test_parse_tree():
    nodes = parse_template('Hi {{#if name}}{{ name }}!{{/if}}')
    assert nodes[0] == Text('Hi ')
    block = nodes[1]
    assert isinstance(block, Conditional)
    assert block.name == 'name'
    assert block.children == [Placeholder('name'), Text('!')]


def test_empty_field_drops_block_without_residue():
    source = '{{#if email}}{{email}}{{/if}}'
    assert render_template(source, _ctx({'email': ''})) == ''
    assert render_template(source, _ctx({'email': '   '})) == ''
    assert render_template(source, _ctx({'email': 'a@b.c'})) == 'a@b.c'


def test_nested_blocks():
    source = '{{#if a}}A{{#if b}}B{{/if}}{{/if}}.'
    assert render_template(source, _ctx({'a': 'x', 'b': 'y'})) == 'AB.'
    assert render_template(source, _ctx({'a': 'x', 'b': ''})) == 'A.'
    assert render_template(source, _ctx({'a': '', 'b': 'y'})) == '.'


def test_unknown_names():
    assert render_template('[{{nope}}]', _ctx()) == '[]'
    assert render_template('{{#if nope}}X{{/if}}', _ctx()) == ''


def test_scalars_are_escaped_generated_markup_is_not():
    ctx = _ctx({'name': '<Ada & Co>'}, {'education': lambda: '<div>MIT</div>'})
    out = render_template('{{name}}|{{education}}', ctx)
    assert out == '&lt;Ada &amp; Co&gt;|<div>MIT</div>'


def test_generators_run_once_and_only_when_needed():
    calls = []

    def education():
        calls.append(1)
        return '<div>MIT</div>'

    def boom():
        raise AssertionError('should not be generated')

    ctx = _ctx({'title': ''}, {'education': education, 'skills': boom})
    source = '{{#if education}}{{education}}{{education}}{{/if}}{{#if title}}{{skills}}{{/if}}'
    assert render_template(source, ctx) == '<div>MIT</div><div>MIT</div>'
    assert len(calls) == 1


def test_block_on_generated_section_uses_generated_content():
    ctx = _ctx({}, {'skills': lambda: ''})
    assert render_template('{{#if skills}}<h2>Skills</h2>{{/if}}', ctx) == ''


def test_typesetting_conditionals():
    ctx = _ctx({'title': 'R&D', 'phone': ''}, escape=escape_latex)
    source = '\\if{title}T: {{title}}\\fi\\if{phone}P\\fi'
    assert render_template(source, ctx) == 'T: R\\&D'
    assert parse_template(source)[0].kind == TYPESET


def test_latex_fi_outside_if_block_is_text():
    source = '\\newif\\ifdraft \\ifdraft D\\fi'
    assert render_template(source, _ctx()) == source


def test_fi_followed_by_letter_does_not_close():
    source = '\\if{a}\\finish\\fi'
    assert render_template(source, _ctx({'a': 'x'})) == '\\finish'


def test_fi_inside_markup_block_is_text():
    source = '{{#if a}}x\\fi{{/if}}'
    assert render_template(source, _ctx({'a': 'y'})) == 'x\\fi'


@pytest.mark.parametrize(
    'source, position',
    [
        ('ab{{/if}}', 2),
        ('{{#if a}}x', 0),
        ('\\if{a}x{{/if}}', 7),
    ],
)
def test_syntax_errors(source, position):
    with pytest.raises(TemplateSyntaxError) as info:
        parse_template(source, 'broken')
    assert info.value.position == position
    assert info.value.template_id == 'broken'
    assert 'broken' in str(info.value)
