"""
List-style section generators for markup templates.

Each entry becomes a stacked ``cv-entry`` block: title, optional location,
subtitle, date and an optional bullet list. Styling comes from the template's
own stylesheet; these functions only emit structure.
"""

from cvpress.cv_models import CVRecord
from cvpress.dates import format_date
from cvpress.escaping import escape_html
from cvpress.sections.common import (
    SEPARATOR,
    contact_links,
    is_blank,
    renderable,
    split_award,
    split_lines,
)


def _bullets(text: str) -> str:
    items = split_lines(text)
    if not items:
        return ''
    return (
        '<ul class="cv-entry-list">'
        + ''.join(f"<li>{escape_html(item)}</li>" for item in items)
        + '</ul>'
    )


def _date_line(date: str) -> str:
    if is_blank(date):
        return ''
    return f'<div class="cv-entry-date">{escape_html(format_date(date))}</div>'


def education_html(entries) -> str:
    html = ''
    for entry in renderable(entries):
        html += '<div class="cv-entry">'
        html += f'<div class="cv-entry-title">{escape_html(entry.university)}</div>'
        if not is_blank(entry.city):
            html += f'<div class="cv-entry-location">{escape_html(entry.city)}</div>'
        degree = escape_html(entry.degree)
        if not is_blank(entry.gpa):
            degree += f", GPA: {escape_html(entry.gpa)}"
        html += f'<div class="cv-entry-subtitle">{degree}</div>'
        html += _date_line(entry.date)
        if not is_blank(entry.thesis):
            html += (
                '<ul class="cv-entry-list"><li>Thesis: "'
                + escape_html(entry.thesis)
                + '"</li></ul>'
            )
        html += '</div>'
    return html


def experience_html(entries) -> str:
    html = ''
    for entry in renderable(entries):
        html += '<div class="cv-entry">'
        html += f'<div class="cv-entry-title">{escape_html(entry.company)}</div>'
        if not is_blank(entry.city):
            html += f'<div class="cv-entry-location">{escape_html(entry.city)}</div>'
        html += f'<div class="cv-entry-subtitle">{escape_html(entry.position)}</div>'
        html += _date_line(entry.date)
        html += _bullets(entry.description)
        html += '</div>'
    return html


def volunteer_html(entries) -> str:
    html = ''
    for entry in renderable(entries):
        html += '<div class="cv-entry">'
        html += f'<div class="cv-entry-title">{escape_html(entry.organization)}</div>'
        html += f'<div class="cv-entry-subtitle">{escape_html(entry.position)}</div>'
        html += _date_line(entry.date)
        html += _bullets(entry.description)
        html += '</div>'
    return html


def publications_html(text: str) -> str:
    publications = split_lines(text)
    if not publications:
        return ''
    return (
        '<div>'
        + ''.join(
            f'<div class="cv-publication">{escape_html(pub)}.</div>'
            for pub in publications
        )
        + '</div>'
    )


def skills_html(text: str) -> str:
    skills = split_lines(text)
    if not skills:
        return ''
    return (
        '<ul class="cv-entry-list">'
        + ''.join(f"<li><strong>{escape_html(skill)}</strong></li>" for skill in skills)
        + '</ul>'
    )


def hobbies_html(text: str) -> str:
    hobbies = split_lines(text)
    if not hobbies:
        return ''
    return (
        '<ul class="cv-entry-list">'
        + ''.join(f"<li>{escape_html(hobby)}</li>" for hobby in hobbies)
        + '</ul>'
    )


def languages_html(entries) -> str:
    languages = renderable(entries)
    if not languages:
        return ''
    html = '<ul class="cv-entry-list">'
    for entry in languages:
        line = f"<li><strong>{escape_html(entry.name)}:</strong>"
        if not is_blank(entry.level):
            line += f" {escape_html(entry.level)}"
        html += line + '</li>'
    return html + '</ul>'


def projects_html(entries) -> str:
    html = ''
    for entry in renderable(entries):
        html += '<div class="cv-entry">'
        html += f'<div class="cv-entry-title">{escape_html(entry.title)}</div>'
        if not is_blank(entry.tech):
            html += f'<div class="cv-entry-date">{escape_html(entry.tech)}</div>'
        html += f'<div class="cv-entry-description">{escape_html(entry.description)}</div>'
        html += '</div>'
    return html


def award_item(line: str, css_class: str = '') -> str:
    """One award as a list item: two flex cells for ``Title.....Date``, else plain text."""
    cells = split_award(line)
    if cells is None:
        cls = f' class="{css_class}"' if css_class else ''
        return f"<li{cls}>{escape_html(line.strip())}</li>"
    title, date = cells
    cls = f"{css_class} flex justify-between".strip()
    return (
        f'<li class="{cls}">'
        f"<span>{escape_html(title)}</span><span>{escape_html(date)}</span>"
        '</li>'
    )


def awards_html(text: str) -> str:
    awards = split_lines(text)
    if not awards:
        return ''
    return (
        '<ul class="cv-entry-list">'
        + ''.join(award_item(award) for award in awards)
        + '</ul>'
    )


def contact_info_html(record: CVRecord) -> str:
    """Horizontal list of contact links joined by a bullet separator."""
    return SEPARATOR.join(
        f'<a href="{escape_html(link.url)}">{escape_html(link.text)}</a>'
        for link in contact_links(record)
    )
