from datetime import datetime, date
import strawberry

from glowboard.services.validation import parse_calendar_day


def _parse_datetime(value: str) -> datetime:
    # Browsers send UTC timestamps with a trailing Z
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


def _parse_date(value: str) -> date:
    day = parse_calendar_day(value)
    if day is None:
        raise ValueError(f"Invalid date: {value}")
    return day


DateTime = strawberry.scalar(
    datetime,
    description="ISO-8601 formatted datetime",
    serialize=lambda v: v.isoformat(),
    parse_value=_parse_datetime,
)

# Calendar day; full timestamps are accepted and cut to their date
Date = strawberry.scalar(
    date,
    description="ISO-8601 formatted calendar day",
    serialize=lambda v: v.isoformat(),
    parse_value=_parse_date,
)
