"""
Built-in, template-free CV generator.

Used whenever no template source can be loaded or populated. Produces a
complete single-column CV (header plus every non-empty section) using utility
classes, with a small per-template preset for the header and section titles.
The `minimal` template gets its own two-column layout (see `minimal.py`).
"""

from dataclasses import dataclass

from cvpress.cv_models import CVRecord
from cvpress.dates import format_date
from cvpress.escaping import escape_html
from cvpress.sections.common import (
    BUILTIN_REQUIRED_FIELDS,
    is_blank,
    renderable,
    split_award,
    split_lines,
)
from cvpress.sections.listing import contact_info_html
from cvpress.sections.minimal import generate_minimal_cv

FONT_STACK = 'Calibri, Arial, sans-serif'

# Layout with its own two-column generator instead of a class preset
MINIMAL_TEMPLATE = 'minimal'


@dataclass(frozen=True)
class BuiltinPreset:
    header: str
    name: str
    contact: str
    section_title: str
    inline_font: bool = False


PRESETS = {
    'modern': BuiltinPreset(
        header='text-left mb-6 print:mb-4 pb-4 print:pb-2 border-b-2 border-gray-300 print:border-gray-400',
        name='text-3xl font-bold mb-2 print:mb-1 print:text-2xl text-gray-900',
        contact='text-sm print:text-xs text-gray-600 print:text-gray-800',
        section_title='text-xl font-bold mb-3 print:mb-2 print:text-lg border-l-4 border-indigo-500 pl-3 print:pl-2 pb-1 uppercase',
    ),
    'creative': BuiltinPreset(
        header='text-center mb-6 print:mb-4 pb-4 print:pb-2 border-b-4 border-indigo-600 print:border-indigo-800 bg-indigo-50 print:bg-white p-4 print:p-2 rounded-lg print:rounded-none',
        name='text-3xl font-bold mb-2 print:mb-1 print:text-2xl text-indigo-900 print:text-black uppercase',
        contact='text-sm print:text-xs text-indigo-700 print:text-gray-800 font-medium',
        section_title='text-xl font-bold mb-3 print:mb-2 print:text-lg bg-indigo-100 print:bg-white text-indigo-900 print:text-black px-3 print:px-0 py-2 print:py-1 rounded print:rounded-none uppercase',
    ),
    'classic': BuiltinPreset(
        header='text-center mb-6 print:mb-4 pb-4 print:pb-2 border-b-2 border-gray-300 print:border-gray-400',
        name='text-3xl font-bold mb-2 print:mb-1 print:text-2xl',
        contact='text-sm print:text-xs text-gray-600 print:text-gray-800',
        section_title='text-xl font-bold mb-3 print:mb-2 print:text-lg border-b-2 border-gray-300 pb-1 uppercase',
        inline_font=True,
    ),
}

SECTION_CLASSES = 'mb-6 print:mb-4 print:break-inside-avoid'
ENTRY_CLASSES = 'mb-4 print:mb-3 print:break-inside-avoid'
BULLET_CLASSES = 'list-disc list-inside mt-2 print:mt-1 ml-4'
ITEM_CLASSES = 'mb-1 print:mb-0.5'


def preset_for(template_id: str | None) -> BuiltinPreset:
    return PRESETS.get(template_id or 'classic', PRESETS['classic'])


class _Writer:
    """Emits markup for one preset; `font(px)` adds inline font styles when the preset wants them."""

    def __init__(self, preset: BuiltinPreset):
        self.preset = preset

    def font(self, px: int) -> str:
        if not self.preset.inline_font:
            return ''
        return f' style="font-family: {FONT_STACK}; font-size: {px}px;"'

    def section(self, title: str, body: str) -> str:
        if not body:
            return ''
        return (
            f'<div class="{SECTION_CLASSES}">'
            f'<h2 class="{self.preset.section_title}"{self.font(14)}>{title}</h2>'
            f"{body}</div>"
        )

    def bullets(self, lines: list[str]) -> str:
        if not lines:
            return ''
        items = ''.join(f"<li>{escape_html(line)}</li>" for line in lines)
        return f'<ul class="{BULLET_CLASSES}"{self.font(12)}>{items}</ul>'

    def entry(self, title: str, city: str, subtitle: str, date: str, extra: str) -> str:
        html = f'<div class="{ENTRY_CLASSES}">'
        html += f'<div class="font-bold text-lg print:text-base"{self.font(14)}>{title}</div>'
        if city:
            html += f'<div class="text-gray-600 print:text-gray-800 text-sm"{self.font(11)}>{city}</div>'
        if subtitle:
            html += f'<div class="italic text-gray-700 print:text-gray-900"{self.font(12)}>{subtitle}</div>'
        if date:
            html += f'<div class="text-gray-600 print:text-gray-800 text-sm"{self.font(11)}>{date}</div>'
        return html + extra + '</div>'


def _header(w: _Writer, record: CVRecord) -> str:
    contact = contact_info_html(record)
    html = f'<div class="{w.preset.header}">'
    name_style = (
        f' style="font-family: {FONT_STACK}; font-size: 20px;"'
        if w.preset.inline_font
        else ''
    )
    html += f'<h1 class="{w.preset.name}"{name_style}>{escape_html(record.name)}</h1>'
    if not is_blank(record.title):
        html += f'<div class="{w.preset.contact}"{w.font(12)}>{escape_html(record.title)}</div>'
    if contact:
        html += f'<div class="{w.preset.contact}"{w.font(11)}>{contact}</div>'
    return html + '</div>'


def _education(w: _Writer, entries) -> str:
    body = ''
    for entry in renderable(entries, BUILTIN_REQUIRED_FIELDS):
        degree = escape_html(entry.degree)
        if not is_blank(entry.gpa):
            degree += f", GPA: {escape_html(entry.gpa)}"
        thesis = ''
        if not is_blank(entry.thesis):
            thesis = (
                f'<ul class="{BULLET_CLASSES}"{w.font(12)}>'
                f'<li>Thesis: "{escape_html(entry.thesis)}"</li></ul>'
            )
        body += w.entry(
            escape_html(entry.university),
            escape_html(entry.city.strip()),
            degree,
            escape_html(format_date(entry.date)),
            thesis,
        )
    return w.section('EDUCATION', body)


def _experience(w: _Writer, entries) -> str:
    body = ''.join(
        w.entry(
            escape_html(entry.company),
            escape_html(entry.city.strip()),
            escape_html(entry.position),
            escape_html(format_date(entry.date)),
            w.bullets(split_lines(entry.description)),
        )
        for entry in renderable(entries, BUILTIN_REQUIRED_FIELDS)
    )
    return w.section('EXPERIENCE', body)


def _volunteer(w: _Writer, entries) -> str:
    body = ''.join(
        w.entry(
            escape_html(entry.organization),
            '',
            escape_html(entry.position),
            escape_html(format_date(entry.date)),
            w.bullets(split_lines(entry.description)),
        )
        for entry in renderable(entries, BUILTIN_REQUIRED_FIELDS)
    )
    return w.section('VOLUNTEER', body)


def _projects(w: _Writer, entries) -> str:
    body = ''
    for entry in renderable(entries, BUILTIN_REQUIRED_FIELDS):
        title = escape_html(entry.title)
        if not is_blank(entry.tech):
            title += f" ({escape_html(entry.tech)})"
        body += w.entry(title, '', '', '', w.bullets(split_lines(entry.description)))
    return w.section('PROJECTS', body)


def _publications(w: _Writer, text: str) -> str:
    items = split_lines(text)
    if not items:
        return ''
    body = '<div class="print:break-inside-avoid">' + ''.join(
        f'<div class="mb-2 print:mb-1 text-sm print:text-xs"{w.font(12)}>{escape_html(pub)}.</div>'
        for pub in items
    ) + '</div>'
    return w.section('PUBLICATIONS', body)


def _item_list(w: _Writer, title: str, items: list[str]) -> str:
    if not items:
        return ''
    body = '<ul class="list-disc list-inside ml-4 print:ml-3">' + ''.join(items) + '</ul>'
    return w.section(title, body)


def _skills(w: _Writer, text: str) -> str:
    return _item_list(
        w,
        'SKILLS',
        [
            f'<li class="{ITEM_CLASSES}"{w.font(12)}><strong>{escape_html(skill)}</strong></li>'
            for skill in split_lines(text)
        ],
    )


def _languages(w: _Writer, entries) -> str:
    items = []
    for entry in renderable(entries, BUILTIN_REQUIRED_FIELDS):
        line = f'<li class="{ITEM_CLASSES}"{w.font(12)}><strong>{escape_html(entry.name)}:</strong>'
        if not is_blank(entry.level):
            line += f" {escape_html(entry.level)}"
        items.append(line + '</li>')
    return _item_list(w, 'LANGUAGES', items)


def _awards(w: _Writer, text: str) -> str:
    items = []
    for award in split_lines(text):
        cells = split_award(award)
        if cells is None:
            items.append(f'<li class="{ITEM_CLASSES}"{w.font(12)}>{escape_html(award)}</li>')
        else:
            title, date = cells
            items.append(
                f'<li class="{ITEM_CLASSES} flex justify-between"{w.font(12)}>'
                f"<span>{escape_html(title)}</span><span>{escape_html(date)}</span></li>"
            )
    return _item_list(w, 'SCHOLARSHIPS AND AWARDS', items)


def _hobbies(w: _Writer, text: str) -> str:
    return _item_list(
        w,
        'HOBBIES',
        [f'<li class="{ITEM_CLASSES}"{w.font(12)}>{escape_html(h)}</li>' for h in split_lines(text)],
    )


def generate_builtin_cv(record: CVRecord, template_id: str | None = None) -> str:
    """Render `record` without any template file.

    Always returns markup: at least the header, even for a blank record.
    """
    if (template_id or record.template) == MINIMAL_TEMPLATE:
        return generate_minimal_cv(record)
    w = _Writer(preset_for(template_id or record.template))
    return ''.join(
        [
            _header(w, record),
            _education(w, record.education),
            _experience(w, record.experience),
            _volunteer(w, record.volunteer),
            _publications(w, record.publications),
            _skills(w, record.skills),
            _languages(w, record.languages),
            _projects(w, record.projects),
            _awards(w, record.awards),
            _hobbies(w, record.hobbies),
        ]
    )
