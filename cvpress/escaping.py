"""
Context-specific text escaping.

- escape_html: for text placed inside HTML elements or attribute values
- escape_latex: for text placed inside LaTeX sources handed to the typesetting engine
"""

import re

from markupsafe import escape

# Replacement for each LaTeX-significant character. Applied in a single pass so
# the braces emitted for \textbackslash{} and friends are never re-escaped.
LATEX_REPLACEMENTS = {
    '\\': r'\textbackslash{}',
    '{': r'\{',
    '}': r'\}',
    '$': r'\$',
    '%': r'\%',
    '&': r'\&',
    '#': r'\#',
    '^': r'\textasciicircum{}',
    '_': r'\_',
    '~': r'\textasciitilde{}',
}

_LATEX_SPECIALS = re.compile('|'.join(re.escape(ch) for ch in LATEX_REPLACEMENTS))


def escape_html(text: str | None) -> str:
    """Escape ``& < > " '`` so `text` cannot break element or attribute structure.

    >>> escape_html('<b>Tom & Jerry</b>')
    '&lt;b&gt;Tom &amp; Jerry&lt;/b&gt;'
    >>> escape_html(None)
    ''
    """
    if not text:
        return ''
    return str(escape(str(text)))


def escape_latex(text: str | None) -> str:
    """Escape the ten LaTeX control characters.

    Backslash becomes textbackslash, caret and tilde become their text commands,
    the other seven get a leading backslash.

    >>> escape_latex('')
    ''
    """
    if not text:
        return ''
    return _LATEX_SPECIALS.sub(lambda m: LATEX_REPLACEMENTS[m.group(0)], str(text))
