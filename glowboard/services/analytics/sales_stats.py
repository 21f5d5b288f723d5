from datetime import date, timedelta
from typing import Dict, Iterable, List, Optional, Sequence, Union

from pydantic import BaseModel, Field

from glowboard.core.constants import ALL_LOCATIONS, PRODUCT_CATEGORIES, SERVICE_TYPES
from glowboard.schemas.sales_record import SalesRecord
from glowboard.services.analytics.date_ranges import (
    Timeframe,
    get_date_range,
    get_timeframe_label,
    is_date_in_range,
    local_today,
    month_bounds,
)


class SalesStats(BaseModel):
    today_sales: float = 0
    yesterday_sales: float = 0
    week_sales: float = 0
    month_sales: float = 0
    current_period_sales: float = 0
    last_year_period_sales: float = 0
    # Day-over-day growth, percent
    growth: float = 0
    # Year-over-year growth, percent; +inf when last year had no sales
    yoy_growth: float = 0
    total_treatments: int = 0
    avg_daily: float = 0
    timeframe_label: str = ""


class PerformanceMetrics(BaseModel):
    total_sales: float = 0
    total_treatments: int = 0
    avg_sales_per_treatment: float = 0
    avg_daily_sales: float = 0
    record_count: int = 0


class ProductBreakdownSummary(BaseModel):
    totals: Dict[str, float] = Field(default_factory=dict)
    shares: Dict[str, float] = Field(default_factory=dict)
    total: float = 0


class ServiceSummary(BaseModel):
    service: str
    appointments: float = 0
    sales: float = 0
    average_ticket: float = 0


class ServiceBreakdownSummary(BaseModel):
    services: List[ServiceSummary] = Field(default_factory=list)
    total_sales: float = 0
    total_appointments: float = 0


def sum_sales_in_range(records: Iterable[SalesRecord], start: date, end: date) -> float:
    """Sum daily_sales of the records dated within [start, end]."""
    return sum(
        record.daily_sales or 0
        for record in records
        if is_date_in_range(record.date, start, end)
    )


def percent_change(current: float, previous: float) -> float:
    """Year-over-year style change; +inf when only the current period has sales."""
    if previous != 0:
        return (current - previous) / abs(previous) * 100
    return float("inf") if current > 0 else 0.0


def calculate_sales_stats(
    records: Sequence[SalesRecord],
    timeframe: Union[str, Timeframe] = Timeframe.SEVEN_DAYS,
    today: Optional[date] = None
) -> SalesStats:
    """Compute the dashboard statistics for a record set.

    Week and month totals are always the rolling last 7 days and the calendar
    month of today; only the current/last-year period follows ``timeframe``.
    Treatment totals and the daily average cover the whole input.

    Args:
        records: Already location-filtered sales records
        timeframe: Selected reporting timeframe
        today: Reference day; defaults to the current local date

    Returns:
        SalesStats, all zero for an empty input
    """
    today = today or local_today()
    yesterday = today - timedelta(days=1)
    date_range = get_date_range(timeframe, today=today)

    today_sales = sum_sales_in_range(records, today, today)
    yesterday_sales = sum_sales_in_range(records, yesterday, yesterday)
    week_sales = sum_sales_in_range(records, today - timedelta(days=6), today)
    month_start, month_end = month_bounds(today)
    month_sales = sum_sales_in_range(records, month_start, month_end)

    current_period_sales = sum_sales_in_range(records, date_range.start, date_range.end)
    last_year_period_sales = sum_sales_in_range(records, date_range.prev_start, date_range.prev_end)

    growth = 0.0
    if yesterday_sales > 0:
        growth = (today_sales - yesterday_sales) / yesterday_sales * 100

    total_treatments = sum(record.treatments_count or 0 for record in records)
    avg_daily = 0.0
    if records:
        avg_daily = sum(record.daily_sales or 0 for record in records) / len(records)

    return SalesStats(
        today_sales=today_sales,
        yesterday_sales=yesterday_sales,
        week_sales=week_sales,
        month_sales=month_sales,
        current_period_sales=current_period_sales,
        last_year_period_sales=last_year_period_sales,
        growth=growth,
        yoy_growth=percent_change(current_period_sales, last_year_period_sales),
        total_treatments=total_treatments,
        avg_daily=avg_daily,
        timeframe_label=get_timeframe_label(timeframe),
    )


def filter_sales_by_location(
    records: Sequence[SalesRecord],
    location: str,
    user_location: Optional[str] = None,
    is_admin: bool = False
) -> List[SalesRecord]:
    """Apply the role/location filter.

    Admins asking for every location get the input back unchanged. Everyone
    else is limited to the selected location, or to their own location when
    "all" is selected.
    """
    if location == ALL_LOCATIONS and is_admin:
        return list(records)

    target_location = location if location != ALL_LOCATIONS else user_location
    return [record for record in records if record.location == target_location]


def calculate_performance_metrics(records: Sequence[SalesRecord]) -> PerformanceMetrics:
    total_sales = sum(record.daily_sales or 0 for record in records)
    total_treatments = sum(record.treatments_count or 0 for record in records)
    return PerformanceMetrics(
        total_sales=total_sales,
        total_treatments=total_treatments,
        avg_sales_per_treatment=total_sales / total_treatments if total_treatments > 0 else 0,
        avg_daily_sales=total_sales / len(records) if records else 0,
        record_count=len(records),
    )


def aggregate_product_breakdown(records: Sequence[SalesRecord]) -> ProductBreakdownSummary:
    totals = {category: 0.0 for category in PRODUCT_CATEGORIES}
    for record in records:
        if not record.product_breakdown:
            continue
        for category in PRODUCT_CATEGORIES:
            totals[category] += record.product_breakdown.get(category) or 0

    total = sum(totals.values())
    shares = {
        category: (amount / total * 100 if total > 0 else 0)
        for category, amount in totals.items()
    }
    return ProductBreakdownSummary(totals=totals, shares=shares, total=total)


def aggregate_service_breakdown(records: Sequence[SalesRecord]) -> ServiceBreakdownSummary:
    """Per-service appointments and sales; services without sales are left out."""
    totals: Dict[str, Dict[str, float]] = {}
    for record in records:
        for service, line in (record.service_breakdown or {}).items():
            entry = totals.setdefault(service, {"appointments": 0.0, "sales": 0.0})
            entry["appointments"] += line.appointments
            entry["sales"] += line.sales

    services = [
        ServiceSummary(
            service=service,
            appointments=totals[service]["appointments"],
            sales=totals[service]["sales"],
            average_ticket=(
                totals[service]["sales"] / totals[service]["appointments"]
                if totals[service]["appointments"] > 0 else 0
            ),
        )
        for service in SERVICE_TYPES
        if service in totals and totals[service]["sales"] > 0
    ]
    return ServiceBreakdownSummary(
        services=services,
        total_sales=sum(entry["sales"] for entry in totals.values()),
        total_appointments=sum(entry["appointments"] for entry in totals.values()),
    )
