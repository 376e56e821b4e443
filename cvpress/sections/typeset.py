"""
Typesetting (LaTeX) section generators.

Same sections and skip rules as the markup generators, emitted as the macros
defined in the preamble of the typesetting templates:

    \\cventry{title}{date}{subtitle}{location}
    \\cvitem{text}
    \\cvaward{title}{date}

All user text goes through `escape_latex`.
"""

from cvpress.cv_models import CVRecord
from cvpress.dates import format_date
from cvpress.escaping import escape_latex
from cvpress.sections.common import (
    contact_links,
    is_blank,
    renderable,
    split_award,
    split_lines,
)


def _itemize(items: list[str]) -> str:
    if not items:
        return ''
    body = '\n'.join(f"  \\cvitem{{{item}}}" for item in items)
    return f"\\begin{{itemize}}\n{body}\n\\end{{itemize}}\n"


def _entry(title: str, date: str, subtitle: str, location: str) -> str:
    return f"\\cventry{{{title}}}{{{date}}}{{{subtitle}}}{{{location}}}\n"


def _tex_date(date: str) -> str:
    return '' if is_blank(date) else escape_latex(format_date(date))


def education_tex(entries) -> str:
    tex = ''
    for entry in renderable(entries):
        degree = escape_latex(entry.degree)
        if not is_blank(entry.gpa):
            degree += f", GPA: {escape_latex(entry.gpa)}"
        tex += _entry(
            escape_latex(entry.university),
            _tex_date(entry.date),
            degree,
            escape_latex(entry.city),
        )
        if not is_blank(entry.thesis):
            tex += _itemize([f"Thesis: ``{escape_latex(entry.thesis)}''"])
    return tex


def experience_tex(entries) -> str:
    tex = ''
    for entry in renderable(entries):
        tex += _entry(
            escape_latex(entry.company),
            _tex_date(entry.date),
            escape_latex(entry.position),
            escape_latex(entry.city),
        )
        tex += _itemize([escape_latex(line) for line in split_lines(entry.description)])
    return tex


def volunteer_tex(entries) -> str:
    tex = ''
    for entry in renderable(entries):
        tex += _entry(
            escape_latex(entry.organization),
            _tex_date(entry.date),
            escape_latex(entry.position),
            '',
        )
        tex += _itemize([escape_latex(line) for line in split_lines(entry.description)])
    return tex


def projects_tex(entries) -> str:
    tex = ''
    for entry in renderable(entries):
        tex += _entry(escape_latex(entry.title), escape_latex(entry.tech), '', '')
        tex += _itemize([escape_latex(line) for line in split_lines(entry.description)])
    return tex


def languages_tex(entries) -> str:
    items = []
    for entry in renderable(entries):
        line = f"\\textbf{{{escape_latex(entry.name)}:}}"
        if not is_blank(entry.level):
            line += f" {escape_latex(entry.level)}"
        items.append(line)
    return _itemize(items)


def list_tex(text: str) -> str:
    """Free-text block (skills, publications, hobbies): one item per line."""
    return _itemize([escape_latex(line) for line in split_lines(text)])


def awards_tex(text: str) -> str:
    awards = split_lines(text)
    if not awards:
        return ''
    lines = []
    for award in awards:
        cells = split_award(award)
        if cells is None:
            lines.append(f"  \\cvitem{{{escape_latex(award)}}}")
        else:
            title, date = cells
            lines.append(f"  \\cvaward{{{escape_latex(title)}}}{{{escape_latex(date)}}}")
    body = '\n'.join(lines)
    return f"\\begin{{itemize}}\n{body}\n\\end{{itemize}}\n"


def contact_info_tex(record: CVRecord) -> str:
    return ' $|$ '.join(
        f"\\href{{{escape_latex(link.url)}}}{{{escape_latex(link.text)}}}"
        for link in contact_links(record)
    )
