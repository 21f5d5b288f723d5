import strawberry
from typing import List, Optional

from glowboard.api.graphql.types.scalars import Date


@strawberry.type
class DateRange:
    start: Date
    end: Date
    prev_start: Date
    prev_end: Date


@strawberry.type
class SalesStats:
    today_sales: float
    yesterday_sales: float
    week_sales: float
    month_sales: float
    current_period_sales: float
    last_year_period_sales: float
    growth: float
    # Null when last year had no sales but this period does
    yoy_growth: Optional[float]
    yoy_growth_is_infinite: bool
    total_treatments: int
    avg_daily: float
    timeframe_label: str


@strawberry.type
class PerformanceMetrics:
    total_sales: float
    total_treatments: int
    avg_sales_per_treatment: float
    avg_daily_sales: float
    record_count: int


@strawberry.type
class ProductShare:
    category: str
    amount: float
    share: float


@strawberry.type
class ProductBreakdown:
    categories: List[ProductShare]
    total: float


@strawberry.type
class ServiceSummary:
    service: str
    appointments: float
    sales: float
    average_ticket: float


@strawberry.type
class ServiceBreakdown:
    services: List[ServiceSummary]
    total_sales: float
    total_appointments: float


@strawberry.type
class LeaderboardEntry:
    rank: int
    location: str
    sales: float
    treatments: int
    date: Date


@strawberry.type
class LocationLeaderboard:
    entries: List[LeaderboardEntry]
    is_today: bool
    day: Optional[Date] = None


@strawberry.type
class SellerRanking:
    rank: int
    name: str
    sales: float
    locations: List[str]
    location_count: int


@strawberry.type
class GoalProgress:
    month: Date
    total_service_sales: float
    total_retail_sales: float
    total_sales: float
    service_goal: float
    retail_goal: float
    total_goal: float
    total_progress_percentage: float
    service_progress_percentage: float
    retail_progress_percentage: float
    remaining_amount: float
    remaining_service_amount: float
    remaining_retail_amount: float
    days_in_month: int
    days_remaining: int
    daily_run_rate_needed: float
    current_daily_average: float
    on_track: bool
    tier: str
    location: Optional[str] = None
