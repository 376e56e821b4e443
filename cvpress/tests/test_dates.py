"""Tests for cvpress.dates"""

import pytest

from cvpress.dates import (
    MONTH_NAMES,
    format_date,
    format_date_range,
    format_month_year,
    format_year_range,
    format_year_span,
)


@pytest.mark.parametrize('month', range(1, 13))
def test_every_valid_month(month):
    assert format_month_year(f'2021-{month:02d}') == f'{MONTH_NAMES[month - 1]} 2021'


def test_known_values():
    assert format_month_year('2021-03') == 'March 2021'
    assert format_month_year(' 1999-12 ') == 'December 1999'


@pytest.mark.parametrize('value', ['', '   ', None, '2021', '2021-00', '2021-13', '2021-ab'])
def test_malformed_or_empty_month_is_none(value):
    assert format_month_year(value) is None


def test_date_range_table():
    assert format_date_range('', '') == 'Present'
    assert format_date_range(None, None) == 'Present'
    assert format_date_range('2019-09', '2021-06') == 'September 2019 - June 2021'
    assert format_date_range('2019-09', '') == 'September 2019 - Present'
    assert format_date_range('', '2021-06') == 'Present - June 2021'


def test_malformed_bound_counts_as_absent():
    assert format_date_range('2019-99', '2021-06') == 'Present - June 2021'


def test_format_date():
    assert format_date('') == 'Present'
    assert format_date('  ') == 'Present'
    assert format_date(' May 2020 - Present ') == 'May 2020 - Present'


def test_format_year_range():
    assert format_year_range('2018-09', '2023-06') == '2018 - 2023'
    assert format_year_range('', '2023-06') == '2023'
    assert format_year_range('2018-09', '') == '2018'
    assert format_year_range(None, None) == ''


@pytest.mark.parametrize(
    'start, end, expected',
    [
        ('2019-09', '2021-06', '2019-2021'),
        ('2019-09', '', '2019-Present'),
        ('', '2021-06', '-2021'),
        ('', '', ''),
    ],
)
def test_format_year_span(start, end, expected):
    assert format_year_span(start, end) == expected
