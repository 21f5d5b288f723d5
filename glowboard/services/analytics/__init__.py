from glowboard.services.analytics.date_ranges import (
    DateRange,
    Timeframe,
    get_date_range,
    is_date_in_range,
    format_date_for_timeframe,
    get_timeframe_label,
)

__all__ = [
    'DateRange',
    'Timeframe',
    'get_date_range',
    'is_date_in_range',
    'format_date_for_timeframe',
    'get_timeframe_label',
]
