"""Tests for cvpress.escaping"""

import pytest

from cvpress.escaping import LATEX_REPLACEMENTS, escape_html, escape_latex


@pytest.mark.parametrize(
    'text',
    ['<script>alert(1)</script>', 'Tom & "Jerry"', "O'Brien", '<>&"\'', 'a < b > c'],
)
def test_escape_html_leaves_no_special_characters(text):
    out = escape_html(text)
    for ch in '<>"\'':
        assert ch not in out
    # every ampersand left over starts an entity
    assert out.count('&') == out.count(';')


def test_escape_html_values():
    assert escape_html('<b>"x" & \'y\'</b>') == '&lt;b&gt;&#34;x&#34; &amp; &#39;y&#39;&lt;/b&gt;'
    assert escape_html('') == ''
    assert escape_html(None) == ''
    assert escape_html('plain') == 'plain'


def test_escape_latex_values():
    assert escape_latex('50% of $10 & #1_a') == r'50\% of \$10 \& \#1\_a'
    assert escape_latex('{x}') == r'\{x\}'
    assert escape_latex('^~') == r'\textasciicircum{}\textasciitilde{}'
    assert escape_latex(None) == ''


def test_escape_latex_backslash_is_not_re_escaped():
    assert escape_latex('\\') == r'\textbackslash{}'
    assert escape_latex('a\\b') == r'a\textbackslash{}b'


def test_escape_latex_covers_ten_characters():
    assert len(LATEX_REPLACEMENTS) == 10
    for ch, replacement in LATEX_REPLACEMENTS.items():
        assert escape_latex(ch) == replacement
