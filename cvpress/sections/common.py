"""
Shared policy for section generators.

Holds the declarative render gates (which fields an entry needs before it is
rendered at all), line splitting for free-text sections, the award separator
rule, and the contact-link precedence.
"""

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from cvpress.cv_models import (
    CVRecord,
    EducationEntry,
    ExperienceEntry,
    LanguageEntry,
    ProjectEntry,
    VolunteerEntry,
)

# Fields that must be non-blank for an entry to render in template-driven output
REQUIRED_FIELDS: dict[type, tuple[str, ...]] = {
    EducationEntry: ('university', 'degree'),
    ExperienceEntry: ('company', 'position'),
    VolunteerEntry: ('organization', 'position', 'description'),
    LanguageEntry: ('name',),
    ProjectEntry: ('title', 'description'),
}

# The built-in generator only needs a project title
BUILTIN_REQUIRED_FIELDS: dict[type, tuple[str, ...]] = {
    **REQUIRED_FIELDS,
    ProjectEntry: ('title',),
}

AWARD_SEPARATOR = '.....'
SEPARATOR = ' <span>•</span> '


def is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def has_required(entry: Any, required: Iterable[str]) -> bool:
    return all(not is_blank(getattr(entry, name, None)) for name in required)


def renderable(
    entries: Iterable[Any] | None,
    required: dict[type, tuple[str, ...]] = REQUIRED_FIELDS,
) -> list:
    """Entries whose required fields are all present, in their original order."""
    return [
        entry
        for entry in entries or ()
        if has_required(entry, required.get(type(entry), ()))
    ]


def split_lines(text: str | None) -> list[str]:
    """Non-blank lines of `text`, trimmed, order preserved."""
    if not text or not text.strip():
        return []
    return [line.strip() for line in text.split('\n') if line.strip()]


def split_award(line: str) -> tuple[str, str] | None:
    """Split ``"Title.....Date"`` into its two trimmed cells.

    Returns None unless the line has exactly one five-dot separator.

    >>> split_award("Dean's List.....2020")
    ("Dean's List", '2020')
    >>> split_award('Best Paper Award') is None
    True
    """
    parts = re.split(re.escape(AWARD_SEPARATOR), line.strip())
    if len(parts) != 2:
        return None
    return parts[0].strip(), parts[1].strip()


def with_scheme(value: str, prefix: str = 'https://') -> str:
    """Prefix a bare handle or host with `prefix` unless it already has a scheme."""
    value = value.strip()
    return value if value.startswith('http') else f"{prefix}{value}"


@dataclass(frozen=True)
class ContactLink:
    field: str
    label: str
    text: str
    url: str


# Precedence of contact links: (field, label, prefix used for bare handles)
CONTACT_FIELDS = (
    ('website', 'Website', 'https://'),
    ('email', 'Email', 'mailto:'),
    ('linkedin', 'Linkedin', 'https://linkedin.com/in/'),
    ('github', 'Github', 'https://'),
    ('dribbble', 'Dribbble', 'https://'),
    ('instagram', 'Instagram', 'https://'),
)


def contact_links(record: CVRecord) -> Iterator[ContactLink]:
    """Yield the record's non-blank contact links in fixed precedence order."""
    for field, label, prefix in CONTACT_FIELDS:
        value = getattr(record, field, '')
        if is_blank(value):
            continue
        value = value.strip()
        if field == 'email':
            url = f"mailto:{value}"
        else:
            url = with_scheme(value, prefix)
        yield ContactLink(field=field, label=label, text=value, url=url)
