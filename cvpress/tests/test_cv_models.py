"""Tests for cvpress.cv_models"""

from cvpress.cv_models import (
    TEMPLATES,
    TEXT_FIELDS,
    CVRecord,
    EducationEntry,
    ExperienceEntry,
    TemplateFamily,
    default_record,
    template_family,
)


def test_derived_date():
    entry = EducationEntry(university='MIT', dateStart='2018-09', dateEnd='2022-05')
    assert entry.date == 'September 2018 - May 2022'
    assert ExperienceEntry(dateStart='2020-01').date == 'January 2020 - Present'
    assert ExperienceEntry().date == 'Present'


def test_date_is_exported_but_never_read():
    entry = EducationEntry.model_validate({'university': 'MIT', 'date': 'Forever'})
    assert entry.date == 'Present'
    assert entry.model_dump()['date'] == 'Present'


def test_absent_values_take_defaults():
    record = CVRecord.model_validate({'name': None, 'education': None, 'phone': 5551234})
    assert record.name == ''
    assert record.education == []
    assert record.phone == '5551234'


def test_unknown_fields_are_ignored():
    record = CVRecord.model_validate({'name': 'Ada', 'favouriteColour': 'green'})
    assert record.name == 'Ada'
    assert 'favouriteColour' not in record.model_dump()


def test_default_record():
    record = default_record()
    assert record.template == 'classic'
    assert record.margin is None
    assert record.education == [] and record.languages == []
    assert default_record() is not record


def test_text_fields():
    assert 'template' not in TEXT_FIELDS
    assert 'education' not in TEXT_FIELDS
    for name in ('name', 'cityOfBirth', 'publications', 'awards', 'hobbies'):
        assert name in TEXT_FIELDS


def test_template_family():
    assert template_family('sidebar') is TemplateFamily.TIMELINE
    assert template_family('classic') is TemplateFamily.LIST
    assert template_family(None) is TemplateFamily.LIST
    ids = [t.id for t in TEMPLATES]
    assert len(ids) == len(set(ids))
