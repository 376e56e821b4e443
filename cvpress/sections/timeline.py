"""
Timeline section generators for the sidebar template.

Entries become dated nodes (icon marker, title, ``role | date`` meta line and
an optional description). Entries missing required fields are skipped.
"""

from cvpress.cv_models import CVRecord
from cvpress.dates import format_date
from cvpress.escaping import escape_html
from cvpress.sections.common import (
    contact_links,
    is_blank,
    renderable,
    split_award,
    split_lines,
)


def _node(title: str, meta: str, description: str, date_cell: str = '') -> str:
    return (
        '<div class="timeline-item">'
        + date_cell
        + '<div class="timeline-content">'
        '<div class="timeline-icon"></div>'
        '<div class="timeline-details">'
        f'<div class="timeline-title">{title}</div>'
        + meta
        + description
        + '</div></div></div>'
    )


def _meta(role: str, date: str) -> str:
    date_str = '' if is_blank(date) else escape_html(format_date(date))
    divider = f"<span>|</span><span>{date_str}</span>" if date_str else ''
    return f'<div class="timeline-meta"><span>{escape_html(role)}</span>{divider}</div>'


def _description(text: str) -> str:
    if is_blank(text):
        return ''
    return f'<div class="timeline-description">{escape_html(text)}</div>'


def education_timeline(entries) -> str:
    html = ''
    for entry in renderable(entries):
        date_text = '' if is_blank(entry.date) else escape_html(format_date(entry.date))
        html += _node(
            escape_html(entry.university),
            f'<div class="timeline-subtitle">{escape_html(entry.degree)}</div>',
            _description(entry.thesis),
            date_cell=f'<div class="timeline-date">{date_text}</div>',
        )
    return html


def experience_timeline(entries) -> str:
    return ''.join(
        _node(
            escape_html(entry.company),
            _meta(entry.position, entry.date),
            _description(entry.description),
        )
        for entry in renderable(entries)
    )


def volunteer_timeline(entries) -> str:
    return ''.join(
        _node(
            escape_html(entry.organization),
            _meta(entry.position, entry.date),
            _description(entry.description),
        )
        for entry in renderable(entries)
    )


def skills_items(text: str) -> str:
    return ''.join(f"<li>{escape_html(skill)}</li>" for skill in split_lines(text))


def hobbies_items(text: str) -> str:
    return ''.join(f"<li>{escape_html(hobby)}</li>" for hobby in split_lines(text))


def awards_timeline(text: str) -> str:
    html = ''
    for award in split_lines(text):
        cells = split_award(award)
        title, year = cells if cells else (award, '')
        year_cell = f'<span class="award-year">{escape_html(year)}</span>' if year else ''
        html += (
            '<div class="award-item"><div class="award-header">'
            f'<span class="award-title">{escape_html(title)}</span>'
            f"{year_cell}</div></div>"
        )
    return html


def links_timeline(record: CVRecord) -> str:
    """Social and web links laid out two per row."""
    links = [link for link in contact_links(record) if link.field != 'email']
    if not links:
        return ''
    # Network profiles lead in the sidebar, the personal website closes the list
    links.sort(key=lambda link: link.field == 'website')
    rows = [links[i : i + 2] for i in range(0, len(links), 2)]
    return ''.join(
        '<div class="link-row">'
        + ''.join(
            '<div class="link-item">'
            f'<a href="{escape_html(link.url)}" target="_blank">{escape_html(link.label)}</a>'
            '</div>'
            for link in row
        )
        + '</div>'
        for row in rows
    )
