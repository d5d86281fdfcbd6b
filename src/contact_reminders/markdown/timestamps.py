"""Reading and writing schedule timestamps like <2023-03-15 Wed +1y>."""

import re
from datetime import datetime

from contact_reminders.file_utils import ParseError
from contact_reminders.markdown.schemas import Timestamp

WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

TIMESTAMP_RE = re.compile(
    r"^<(?P<date>\d{4}-\d{2}-\d{2})"
    r"(?: [A-Za-z]{2,3})?"
    r"(?: (?P<hour>\d{1,2}):(?P<minute>\d{2})(?::(?P<second>\d{2}))?)?"
    r"(?: (?P<repeater>\+\d+[dwmy]))?>$"
)


def format_timestamp(timestamp: Timestamp) -> str:
    """Render a timestamp as <YYYY-MM-DD Ddd[ HH:MM[:SS]][ +Nu]>."""
    moment = timestamp.moment
    parts = [moment.strftime("%Y-%m-%d"), WEEKDAYS[moment.weekday()]]
    if moment.second:
        parts.append(moment.strftime("%H:%M:%S"))
    elif moment.hour or moment.minute:
        parts.append(moment.strftime("%H:%M"))
    if timestamp.repeater:
        parts.append(timestamp.repeater)
    return f"<{' '.join(parts)}>"


def parse_timestamp(value: str) -> Timestamp:
    """Parse a timestamp written by format_timestamp."""
    match = TIMESTAMP_RE.match(value.strip())
    if not match:
        raise ParseError(f"Invalid timestamp: {value!r}")

    try:
        moment = datetime.strptime(match.group("date"), "%Y-%m-%d")
        if match.group("hour") is not None:
            moment = moment.replace(
                hour=int(match.group("hour")),
                minute=int(match.group("minute")),
                second=int(match.group("second") or 0),
            )
    except ValueError as e:
        raise ParseError(f"Invalid timestamp: {value!r}: {e}") from e

    return Timestamp(moment=moment, repeater=match.group("repeater"))
