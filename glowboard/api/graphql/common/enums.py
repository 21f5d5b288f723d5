from enum import Enum
import strawberry

from glowboard.services.analytics.date_ranges import Timeframe as TimeframeValue

# Reporting timeframes, shared by every analytics query
Timeframe = strawberry.enum(TimeframeValue, name="Timeframe")


@strawberry.enum
class NotePriority(Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@strawberry.enum
class NoteDateRange(Enum):
    ALL = "all"
    TODAY = "today"
    WEEK = "week"
    MONTH = "month"
