"""
Date formatting for CV periods.

Periods are pairs of optional ``YYYY-MM`` strings as produced by month inputs.
"""

import re

MONTH_NAMES = (
    'January',
    'February',
    'March',
    'April',
    'May',
    'June',
    'July',
    'August',
    'September',
    'October',
    'November',
    'December',
)

PRESENT = 'Present'

_LEADING_INT = re.compile(r'\s*([+-]?\d+)')


def _leading_int(text: str) -> int | None:
    m = _LEADING_INT.match(text)
    return int(m.group(1)) if m else None


def format_month_year(month_input: str | None) -> str | None:
    """Convert ``YYYY-MM`` to ``"Month YYYY"``.

    Returns None for empty input, and also when the month component is not a
    number in 1..12 (malformed input fails closed instead of raising).

    >>> format_month_year('2021-03')
    'March 2021'
    >>> format_month_year('2021-03-15')
    'March 2021'
    >>> format_month_year('') is None
    True
    >>> format_month_year('2021-xx') is None
    True
    """
    if not month_input or not month_input.strip():
        return None
    year, _, rest = month_input.strip().partition('-')
    month = _leading_int(rest)
    if month is None or not 1 <= month <= len(MONTH_NAMES):
        return None
    return f"{MONTH_NAMES[month - 1]} {year}"


def format_date_range(start_date: str | None, end_date: str | None) -> str:
    """Build the display-date for a period.

    >>> format_date_range('2019-09', '2021-06')
    'September 2019 - June 2021'
    >>> format_date_range('2019-09', '')
    'September 2019 - Present'
    >>> format_date_range('', '2021-06')
    'Present - June 2021'
    >>> format_date_range(None, None)
    'Present'
    """
    start = format_month_year(start_date)
    end = format_month_year(end_date)

    if not start and not end:
        return PRESENT
    if not start:
        return f"{PRESENT} - {end}"
    if not end:
        return f"{start} - {PRESENT}"
    return f"{start} - {end}"


def format_date(date: str | None) -> str:
    """Return a pre-formatted display-date, or "Present" when it is blank."""
    if not date or not date.strip():
        return PRESENT
    return date.strip()


def format_year_range(start_date: str | None, end_date: str | None) -> str:
    """Year-only range used by compact layouts, e.g. ``"2018 - 2023"``.

    >>> format_year_range('2018-09', '2023-06')
    '2018 - 2023'
    >>> format_year_range('2018-09', '')
    '2018'
    >>> format_year_range('', '')
    ''
    """
    start = (start_date or '').split('-')[0].strip()
    end = (end_date or '').split('-')[0].strip()
    if not start:
        return end
    if not end:
        return start
    return f"{start} - {end}"


def format_year_span(start_date: str | None, end_date: str | None) -> str:
    """Compact year span for job-like periods: ``"2019-2021"``, ``"2019-Present"``, ``"-2021"``.

    >>> format_year_span('2019-09', '2021-06')
    '2019-2021'
    >>> format_year_span('2019-09', '')
    '2019-Present'
    >>> format_year_span('', '2021-06')
    '-2021'
    """
    start = (start_date or '').split('-')[0].strip()
    end = (end_date or '').split('-')[0].strip()
    if start and end:
        return f"{start}-{end}"
    if start:
        return f"{start}-{PRESENT}"
    if end:
        return f"-{end}"
    return ''
