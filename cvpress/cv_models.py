"""Pydantic models for the CV record.

Field names are the wire format of the JSON import/export document, so they
keep the camelCase spelling used by exported files (``dateStart``,
``cityOfBirth``, ...).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from cvpress.dates import format_date_range


class _CVModel(BaseModel):
    """Absent values become the field default; numbers in text fields become text."""

    model_config = ConfigDict(extra='ignore')

    @field_validator('*', mode='before')
    @classmethod
    def _absent_is_default(cls, value, info):
        field = cls.model_fields[info.field_name]
        if value is None:
            return field.get_default(call_default_factory=True)
        if (
            field.annotation is str
            and isinstance(value, (int, float))
            and not isinstance(value, bool)
        ):
            return str(value)
        return value


class _PeriodEntry(_CVModel):
    """An entry with a (dateStart, dateEnd) period and its derived display-date."""

    dateStart: str = Field('', description='YYYY-MM')
    dateEnd: str = Field('', description='YYYY-MM, blank while ongoing')

    @computed_field
    @property
    def date(self) -> str:
        return format_date_range(self.dateStart, self.dateEnd)


class EducationEntry(_PeriodEntry):
    university: str = ''
    city: str = ''
    degree: str = ''
    gpa: str = ''
    thesis: str = ''


class ExperienceEntry(_PeriodEntry):
    company: str = ''
    city: str = ''
    position: str = ''
    description: str = Field('', description='One bullet per non-blank line')


class VolunteerEntry(_PeriodEntry):
    organization: str = ''
    position: str = ''
    description: str = ''


class LanguageEntry(_CVModel):
    name: str = ''
    level: str = Field('', description='e.g. Native, C1, Fluent')


class ProjectEntry(_CVModel):
    title: str = ''
    tech: str = Field('', description='Technology tag, e.g. Python, Django')
    description: str = ''


class CVRecord(_CVModel):
    template: str = 'classic'
    name: str = ''
    photo: str = Field('', description='Photo as a data URL')
    title: str = ''
    phone: str = ''
    birthdate: str = ''
    cityOfBirth: str = ''
    location: str = ''
    website: str = ''
    email: str = ''
    linkedin: str = ''
    github: str = ''
    dribbble: str = ''
    instagram: str = ''
    about: str = ''
    hobbies: str = ''
    education: list[EducationEntry] = Field(default_factory=list)
    experience: list[ExperienceEntry] = Field(default_factory=list)
    volunteer: list[VolunteerEntry] = Field(default_factory=list)
    publications: str = ''
    skills: str = ''
    languages: list[LanguageEntry] = Field(default_factory=list)
    projects: list[ProjectEntry] = Field(default_factory=list)
    awards: str = ''
    margin: list[float] | None = Field(
        None, description='Page margins (top, right, bottom, left)'
    )
    paperSize: str | None = None
    orientation: str | None = None


# Scalar text fields of CVRecord, in declaration order
TEXT_FIELDS = tuple(
    name
    for name, field in CVRecord.model_fields.items()
    if field.annotation is str and name != 'template'
)

# Repeated entity fields and their entry models
ENTRY_MODELS = {
    'education': EducationEntry,
    'experience': ExperienceEntry,
    'volunteer': VolunteerEntry,
    'languages': LanguageEntry,
    'projects': ProjectEntry,
}

PAGE_OPTION_FIELDS = ('margin', 'paperSize', 'orientation')


def default_record() -> CVRecord:
    """A fresh, blank record."""
    return CVRecord()


class TemplateFamily(str, Enum):
    LIST = 'list'
    TIMELINE = 'timeline'
    TYPESET = 'typeset'


# The one template identifier that uses the timeline generator set
TIMELINE_TEMPLATE = 'sidebar'


@dataclass(frozen=True)
class TemplateInfo:
    id: str
    label: str
    description: str
    family: TemplateFamily = TemplateFamily.LIST


TEMPLATES: tuple[TemplateInfo, ...] = (
    TemplateInfo('classic', 'Classic', 'Single column, centered header - ATS friendly'),
    TemplateInfo('modern', 'Modern', 'Single column clean layout with accent rules'),
    TemplateInfo('creative', 'Creative', 'Tinted header and section bands'),
    TemplateInfo('minimal', 'Minimal', 'Clean minimalist design - simple and elegant'),
    TemplateInfo(
        TIMELINE_TEMPLATE,
        'Sidebar',
        'Two-column layout with sidebar and timeline',
        TemplateFamily.TIMELINE,
    ),
    TemplateInfo(
        'academic',
        'Academic',
        'Typeset academic resume, Times-style serif',
        TemplateFamily.TYPESET,
    ),
)


def template_family(template_id: str | None) -> TemplateFamily:
    """Family of a markup template id (typesetting is decided by the loaded source)."""
    if template_id == TIMELINE_TEMPLATE:
        return TemplateFamily.TIMELINE
    return TemplateFamily.LIST
