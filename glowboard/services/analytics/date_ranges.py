import calendar
from datetime import date, timedelta
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel


class Timeframe(str, Enum):
    YESTERDAY = "yesterday"
    TODAY = "1day"
    SEVEN_DAYS = "7days"
    MONTH = "1month"
    QUARTER = "1quarter"
    SIX_MONTHS = "6months"
    YEAR = "1year"
    CUSTOM = "custom"


TIMEFRAME_LABELS = {
    Timeframe.YESTERDAY: "Yesterday",
    Timeframe.TODAY: "Today",
    Timeframe.SEVEN_DAYS: "Last 7 Days",
    Timeframe.MONTH: "This Month",
    Timeframe.QUARTER: "This Quarter",
    Timeframe.SIX_MONTHS: "Last 6 Months",
    Timeframe.YEAR: "This Year",
    Timeframe.CUSTOM: "Custom Period",
}


class DateRange(BaseModel):
    """A reporting window and its year-ago comparison window, inclusive."""
    start: date
    end: date
    prev_start: date
    prev_end: date


def local_today() -> date:
    return date.today()


def to_timeframe(value: Union[str, Timeframe, None]) -> Timeframe:
    """Coerce a raw selection to a Timeframe; unknown values mean yesterday."""
    if isinstance(value, Timeframe):
        return value
    try:
        return Timeframe(value)
    except ValueError:
        return Timeframe.YESTERDAY


def shift_months(d: date, months: int) -> date:
    """Move a date by whole months, clamping to the last day of the target month."""
    month_index = d.year * 12 + (d.month - 1) + months
    year, month = divmod(month_index, 12)
    month += 1
    day = min(d.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def shift_years(d: date, years: int) -> date:
    return shift_months(d, years * 12)


def month_bounds(d: date):
    return date(d.year, d.month, 1), date(d.year, d.month, calendar.monthrange(d.year, d.month)[1])


def quarter_bounds(d: date):
    first_month = 3 * ((d.month - 1) // 3) + 1
    start = date(d.year, first_month, 1)
    _, end = month_bounds(date(d.year, first_month + 2, 1))
    return start, end


def year_bounds(d: date):
    return date(d.year, 1, 1), date(d.year, 12, 31)


def get_date_range(
    timeframe: Union[str, Timeframe],
    custom_start: Optional[date] = None,
    custom_end: Optional[date] = None,
    today: Optional[date] = None
) -> DateRange:
    """Resolve a named timeframe to concrete boundaries.

    The comparison window is the same window one year earlier, except for
    custom ranges: those compare against ``custom_start - (span + 365 days)``
    through ``custom_end - 365 days``. A custom range without both bounds
    resolves as yesterday.

    Args:
        timeframe: Timeframe value or its string form
        custom_start: First day of a custom range
        custom_end: Last day of a custom range
        today: Reference day; defaults to the current local date

    Returns:
        DateRange with start, end, prev_start and prev_end
    """
    timeframe = to_timeframe(timeframe)
    today = today or local_today()
    last_year = shift_years(today, -1)

    if timeframe == Timeframe.TODAY:
        return DateRange(start=today, end=today, prev_start=last_year, prev_end=last_year)

    if timeframe == Timeframe.SEVEN_DAYS:
        return DateRange(
            start=today - timedelta(days=6),
            end=today,
            prev_start=last_year - timedelta(days=6),
            prev_end=last_year,
        )

    if timeframe == Timeframe.MONTH:
        start, end = month_bounds(today)
        prev_start, prev_end = month_bounds(last_year)
        return DateRange(start=start, end=end, prev_start=prev_start, prev_end=prev_end)

    if timeframe == Timeframe.QUARTER:
        start, end = quarter_bounds(today)
        prev_start, prev_end = quarter_bounds(last_year)
        return DateRange(start=start, end=end, prev_start=prev_start, prev_end=prev_end)

    if timeframe == Timeframe.SIX_MONTHS:
        return DateRange(
            start=shift_months(today, -6),
            end=today,
            prev_start=shift_months(last_year, -6),
            prev_end=last_year,
        )

    if timeframe == Timeframe.YEAR:
        start, end = year_bounds(today)
        prev_start, prev_end = year_bounds(last_year)
        return DateRange(start=start, end=end, prev_start=prev_start, prev_end=prev_end)

    if timeframe == Timeframe.CUSTOM and custom_start and custom_end:
        days_diff = (custom_end - custom_start).days
        return DateRange(
            start=custom_start,
            end=custom_end,
            prev_start=custom_start - timedelta(days=days_diff + 365),
            prev_end=custom_end - timedelta(days=365),
        )

    yesterday = today - timedelta(days=1)
    year_ago = shift_years(yesterday, -1)
    return DateRange(start=yesterday, end=yesterday, prev_start=year_ago, prev_end=year_ago)


def is_date_in_range(d: date, start: date, end: date) -> bool:
    return start <= d <= end


def format_date_for_timeframe(d: date, timeframe: Union[str, Timeframe]) -> str:
    timeframe = to_timeframe(timeframe)
    if timeframe in (Timeframe.MONTH, Timeframe.QUARTER, Timeframe.SIX_MONTHS, Timeframe.YEAR):
        return d.strftime("%b %Y")
    return f"{d.strftime('%b')} {d.day}"


def get_timeframe_label(timeframe: Union[str, Timeframe]) -> str:
    return TIMEFRAME_LABELS[to_timeframe(timeframe)]
