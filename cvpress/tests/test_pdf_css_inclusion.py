from cvpress import printing
from cvpress.base import RenderingConfig
from cvpress.renderers.html import HTMLRenderer
from cvpress.tools import ensure_cv_record
from cvpress.util import cv_json_example


def test_pdf_includes_page_and_custom_css(monkeypatch):
    """When rendering to PDF, page options and custom CSS are passed to WeasyPrint."""
    content = ensure_cv_record(str(cv_json_example)).model_copy(
        update={'margin': [12, 12, 12, 12], 'paperSize': 'A4', 'template': 'modern'}
    )

    captured = {'css_strings': None, 'html': None}

    class FakeCSS:
        def __init__(self, string=None):
            self.string = string

    class FakeHTML:
        def __init__(self, string=None):
            captured['html'] = string

        def write_pdf(self, stylesheets=None, **kwargs):
            captured['css_strings'] = '\n'.join(
                getattr(s, 'string', '') for s in stylesheets or []
            )
            return b'%PDF-FAKE'

    fake_weasy = type('W', (), {'HTML': FakeHTML, 'CSS': FakeCSS})
    monkeypatch.setattr(printing, 'weasyprint', fake_weasy)

    cfg = RenderingConfig(
        format='pdf', custom_css='h1 { font-family: Arial; }', print_cleanup_delay=0
    )
    pdf_bytes = HTMLRenderer().render(content, cfg)

    assert pdf_bytes.startswith(b'%PDF')
    css_text = captured['css_strings'] or ''
    assert '@page { size: A4; margin: 12mm 12mm 12mm 12mm; }' in css_text
    assert 'font-family: Arial' in css_text
    assert 'tempPrintContainer' in captured['html']
