"""
Page compositor: places populated CV markup into a fixed-size preview page.

The populated document is reduced to its style rules and body, then wrapped in
a container sized like a US Letter page at 72 DPI. Timeline templates bring
their own two-column layout and get the ``fluid`` preset; everything else gets
the ``fixed`` preset with uniform padding.
"""

import re
from dataclasses import dataclass

from jinja2 import Environment, PackageLoader, select_autoescape

from cvpress.cv_models import TemplateFamily, template_family
from cvpress.populate import PopulatedCV

PAGE_WIDTH_PX = 612
PAGE_HEIGHT_PX = 792
PADDING_PX = 24
SIDEBAR_WIDTH_PX = 210

FIXED = 'fixed'
FLUID = 'fluid'

CLASSIC_TEMPLATE = 'classic'
CLASSIC_FONT_URL = (
    'https://fonts.googleapis.com/css2?family=Latin+Modern+Roman:wght@400;700&display=swap'
)
CLASSIC_FONT_STACK = (
    "'Latin Modern Roman', 'Computer Modern', 'Times New Roman', 'Times', serif"
)

_STYLE = re.compile(r'<style[^>]*>([\s\S]*?)</style>', re.IGNORECASE)
_BODY = re.compile(r'<body[^>]*>([\s\S]*)</body>', re.IGNORECASE)

_env = Environment(
    loader=PackageLoader('cvpress', 'templates'),
    autoescape=select_autoescape(['html', 'xml', 'html.j2']),
    keep_trailing_newline=True,
)


def extract_styles(html: str) -> str:
    """All ``<style>`` bodies of `html`, joined by newlines.

    >>> extract_styles('<style>a{}</style><p>x</p><style media="print">b{}</style>')
    'a{}\\nb{}'
    >>> extract_styles('<p>no styles</p>')
    ''
    """
    return '\n'.join(_STYLE.findall(html))


def extract_body(html: str) -> str:
    """Content between ``<body>`` and ``</body>``, or `html` itself if there is none.

    >>> extract_body('<html><body class="x"><p>hi</p></body></html>')
    '<p>hi</p>'
    >>> extract_body('<p>fragment</p>')
    '<p>fragment</p>'
    """
    m = _BODY.search(html)
    return m.group(1) if m else html


def preview_scale(available_width: float | None = None) -> float:
    """Scale factor fitting the page into `available_width` pixels; never above 1.

    >>> preview_scale(306)
    0.5
    >>> preview_scale(2000)
    1
    >>> preview_scale()
    1
    """
    if available_width is None:
        return 1
    return min(1, available_width / PAGE_WIDTH_PX)


@dataclass(frozen=True)
class ComposedPage:
    styles: str
    body: str
    width: int
    height: int
    scale: float
    preset: str
    fragment: str
    html: str


def preset_for(family: TemplateFamily, from_template: bool = True) -> str:
    if from_template and family is TemplateFamily.TIMELINE:
        return FLUID
    return FIXED


def compose(
    populated: PopulatedCV | str,
    template_id: str | None = None,
    available_width: float | None = None,
    container_id: str = 'cvPreview',
) -> ComposedPage:
    """Compose the preview page for populated CV markup.

    `populated` is usually what `TemplatePopulator.populate_cv` returns; plain
    markup is accepted too and is taken to come from `template_id`'s template.
    """
    if isinstance(populated, PopulatedCV):
        template_id = template_id or populated.template_id
        family, from_template = populated.family, populated.from_template
        html = populated.html
    else:
        family, from_template = template_family(template_id or ''), True
        html = populated

    styles = extract_styles(html)
    body = extract_body(html)
    scale = preview_scale(available_width)
    preset = preset_for(family, from_template)

    ctx = dict(
        styles=styles,
        body=body,
        preset=preset,
        scale=scale,
        width=PAGE_WIDTH_PX,
        height=PAGE_HEIGHT_PX,
        padding=PADDING_PX,
        sidebar_width=SIDEBAR_WIDTH_PX,
        container_id=container_id,
        classic_fonts=template_id == CLASSIC_TEMPLATE,
        font_url=CLASSIC_FONT_URL,
        classic_font_stack=CLASSIC_FONT_STACK,
        title=template_id or 'CV',
    )
    return ComposedPage(
        styles=styles,
        body=body,
        width=PAGE_WIDTH_PX,
        height=PAGE_HEIGHT_PX,
        scale=scale,
        preset=preset,
        fragment=_env.get_template('_container.html.j2').render(**ctx),
        html=_env.get_template('_page.html.j2').render(**ctx),
    )
