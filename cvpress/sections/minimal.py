"""
Two-column minimalist variant of the built-in generator.

The narrow left column holds identity, contact details, education (years only),
skills, languages and hobbies; the wide right column holds experience,
projects, volunteering, publications and awards. Columns are separated by
thin rules instead of section bands.
"""

from cvpress.cv_models import CVRecord
from cvpress.dates import format_year_range, format_year_span
from cvpress.escaping import escape_html
from cvpress.sections.common import (
    BUILTIN_REQUIRED_FIELDS,
    contact_links,
    is_blank,
    renderable,
    split_lines,
)

FONT_STACK = "'Montserrat', Arial, sans-serif"

SEPARATOR = '<div class="minimal-separator"></div>'

STYLES = f"""<style>
.minimal-cv {{ display: flex; width: 100%; font-family: {FONT_STACK}; font-size: 12px; }}
.minimal-left {{ flex: 0 0 33%; padding-right: 15px; }}
.minimal-right {{ flex: 0 0 67%; padding-left: 24px; }}
.minimal-name {{ font-size: 32px; font-weight: bold; margin: 0 0 4px; }}
.minimal-title {{ font-weight: bold; margin-bottom: 24px; text-transform: uppercase; }}
.minimal-photo {{ width: 210px; height: 300px; overflow: hidden; margin: 20px 0; }}
.minimal-photo img {{ width: 100%; height: 100%; object-fit: cover; }}
.minimal-section-header {{ font-weight: bold; margin-bottom: 12px; text-transform: uppercase; }}
.minimal-section {{ margin-bottom: 24px; font-size: 11px; line-height: 1.7; }}
.minimal-separator {{ border-top: 1px solid currentColor; margin: 16px 0; opacity: 0.3; }}
.minimal-entry {{ margin-bottom: 16px; }}
.minimal-entry-title {{ font-size: 12px; font-weight: bold; margin-bottom: 4px; }}
.minimal-meta {{ font-size: 10px; color: #666; }}
.minimal-cv a {{ color: #000; text-decoration: none; }}
</style>"""


def _section(title: str, body: str) -> str:
    if not body:
        return ''
    return (
        f'<div class="minimal-section">'
        f'<div class="minimal-section-header">{title}</div>{body}</div>'
    )


def _lines(text: str, bullet: str = '') -> str:
    return ''.join(f"<div>{bullet}{escape_html(line)}</div>" for line in split_lines(text))


def _place(name: str, city: str) -> str:
    place = escape_html(name)
    if not is_blank(city):
        place += f", {escape_html(city.strip())}"
    return place


def _contact(record: CVRecord) -> str:
    html = ''
    birth = ', '.join(
        escape_html(v.strip()) for v in (record.cityOfBirth, record.birthdate) if not is_blank(v)
    )
    if birth:
        html += f"<div>{birth}</div>"
    if not is_blank(record.phone):
        html += f"<div>{escape_html(record.phone)}</div>"
    if not is_blank(record.location):
        html += f"<div>{escape_html(record.location)}</div>"
    for link in contact_links(record):
        html += f'<div><a href="{escape_html(link.url)}">{escape_html(link.text)}</a></div>'
    return _section('CONTACT', html)


def _education(entries) -> str:
    body = ''
    for entry in renderable(entries, BUILTIN_REQUIRED_FIELDS):
        body += '<div class="minimal-entry">'
        body += f"<div>{_place(entry.university, entry.city)}</div>"
        body += f"<div>{escape_html(entry.degree)}</div>"
        years = format_year_range(entry.dateStart, entry.dateEnd)
        if years:
            body += f'<div class="minimal-meta">{escape_html(years)}</div>'
        if not is_blank(entry.gpa):
            body += f'<div class="minimal-meta">GPA: {escape_html(entry.gpa)}</div>'
        if not is_blank(entry.thesis):
            body += f'<div class="minimal-meta"><em>{escape_html(entry.thesis)}</em></div>'
        body += '</div>'
    return _section('EDUCATION', body)


def _languages(entries) -> str:
    body = ''
    for entry in renderable(entries, BUILTIN_REQUIRED_FIELDS):
        line = escape_html(entry.name)
        if not is_blank(entry.level):
            line += f" - {escape_html(entry.level)}"
        body += f"<div>{line}</div>"
    return _section('LANGUAGES', body)


def _period_entry(title: str, role: str, period: str, description: str) -> str:
    html = f'<div class="minimal-entry"><div class="minimal-entry-title">{title}</div>'
    meta = ' | '.join(escape_html(p) for p in (role, period) if p)
    if meta:
        html += f'<div class="minimal-meta">{meta}</div>'
    return html + _lines(description) + '</div>'


def _right_sections(record: CVRecord) -> list[str]:
    experience = ''.join(
        _period_entry(
            _place(e.company, e.city),
            e.position.strip(),
            format_year_span(e.dateStart, e.dateEnd),
            e.description,
        )
        for e in renderable(record.experience, BUILTIN_REQUIRED_FIELDS)
    )
    projects = ''
    for p in renderable(record.projects, BUILTIN_REQUIRED_FIELDS):
        title = escape_html(p.title)
        if not is_blank(p.tech):
            title += f" ({escape_html(p.tech)})"
        projects += f'<div class="minimal-entry"><div class="minimal-entry-title">{title}</div>'
        projects += _lines(p.description) + '</div>'
    volunteer = ''.join(
        _period_entry(
            escape_html(v.organization),
            v.position.strip(),
            format_year_span(v.dateStart, v.dateEnd),
            v.description,
        )
        for v in renderable(record.volunteer, BUILTIN_REQUIRED_FIELDS)
    )
    awards = SEPARATOR.join(
        f"<div>{escape_html(award)}</div>" for award in split_lines(record.awards)
    )
    sections = [
        _section('EXPERIENCE', experience),
        _section('PROJECTS', projects),
        _section('VOLUNTEER', volunteer),
        _section('PUBLICATIONS', _lines(record.publications)),
        _section('AWARDS', awards),
    ]
    return [s for s in sections if s]


def generate_minimal_cv(record: CVRecord) -> str:
    """Two-column minimalist CV; like every built-in layout it always renders the name."""
    left = f'<h1 class="minimal-name">{escape_html(record.name)}</h1>'
    if not is_blank(record.title):
        left += f'<div class="minimal-title">{escape_html(record.title)}</div>'
    if not is_blank(record.photo):
        left += f'<div class="minimal-photo"><img src="{escape_html(record.photo)}" alt="Profile Photo"></div>'
    left_sections = [
        _contact(record),
        _section('ABOUT ME', escape_html(record.about).replace('\n', '<br>')),
        _education(record.education),
        _section('SKILLS', _lines(record.skills, '• ')),
        _languages(record.languages),
        _section('HOBBIES', _lines(record.hobbies, '• ')),
    ]
    left += SEPARATOR.join(s for s in left_sections if s)
    right = SEPARATOR.join(_right_sections(record))
    return (
        STYLES
        + '<div class="minimal-cv">'
        + f'<div class="minimal-left">{left}</div>'
        + f'<div class="minimal-right">{right}</div>'
        + '</div>'
    )
