"""Tests for the LaTeX typesetting adapter."""

from cvpress import typeset


class RecordingPandoc:
    def __init__(self):
        self.calls = []

    def convert_text(self, source, to, format=None, extra_args=None):
        self.calls.append((source, to, format, extra_args))
        return '<html><body><h1>Ada</h1></body></html>'


class FailingPandoc:
    def convert_text(self, *args, **kwargs):
        raise OSError('No pandoc was found')


def test_latex_to_html_calls_pandoc(monkeypatch):
    pandoc = RecordingPandoc()
    monkeypatch.setattr(typeset, 'pypandoc', pandoc)
    assert typeset.engine_available()
    html = typeset.latex_to_html('\\section*{Ada}')
    assert html == '<html><body><h1>Ada</h1></body></html>'
    assert pandoc.calls == [('\\section*{Ada}', 'html', 'latex', ['--standalone'])]


def test_engine_failure_yields_none(monkeypatch):
    monkeypatch.setattr(typeset, 'pypandoc', FailingPandoc())
    assert typeset.latex_to_html('\\section*{Ada}') is None


def test_missing_engine_yields_none(monkeypatch):
    monkeypatch.setattr(typeset, 'pypandoc', None)
    assert not typeset.engine_available()
    assert typeset.latex_to_html('\\section*{Ada}') is None
