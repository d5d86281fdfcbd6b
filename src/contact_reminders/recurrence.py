"""Annual recurrence.

Only yearly anniversaries are computed here. Repeaters on other units are
accepted for user supplied reminders and written as is, but their
occurrences are never expanded.
"""

import re
from datetime import datetime

YEARLY = "+1y"

# Match patterns like: +1y, 2w, every 1 year, every 3 days, every month
REPEATER_RE = re.compile(
    r"^(?:every\s+)?\+?(\d+)?\s*(d|days?|w|weeks?|m|months?|y|years?)$",
    re.IGNORECASE,
)


def _replace_year(moment: datetime, year: int) -> datetime:
    """Move a datetime to another year; Feb 29 rolls forward to Mar 1."""
    try:
        return moment.replace(year=year)
    except ValueError:
        # only Feb 29 can fail here
        return moment.replace(year=year, month=3, day=1)


def next_annual_occurrence(anniversary: datetime, reference_now: datetime) -> datetime:
    """Return the next occurrence of an annual anniversary.

    An anniversary that is not before ``reference_now`` is returned as is.
    Otherwise it moves to the year after ``reference_now`` with month, day
    and time of day unchanged. The step is taken once, relative to
    ``reference_now``, however far in the past the anniversary lies.
    A 1990-10-10 anniversary checked on 2022-10-05 therefore gives
    2023-10-10, not 2022-10-10.

    Feb 29 landing on a non-leap year becomes Mar 1.
    """
    assert isinstance(anniversary, datetime), f"expected datetime, got {anniversary!r}"
    assert isinstance(reference_now, datetime), f"expected datetime, got {reference_now!r}"

    if not anniversary < reference_now:
        return anniversary
    return _replace_year(anniversary, reference_now.year + 1)


def parse_repeater(value: str) -> str:
    """Normalize a recurrence interval to repeater form.

    >>> parse_repeater("every 1 year")
    '+1y'
    >>> parse_repeater("2w")
    '+2w'
    """
    match = REPEATER_RE.match(value.strip())
    if not match:
        raise ValueError(f"Invalid recurrence interval: {value!r}")

    count = int(match.group(1) or 1)
    if count < 1:
        raise ValueError(f"Recurrence interval must be positive: {value!r}")
    unit = match.group(2).lower()[0]
    return f"+{count}{unit}"
