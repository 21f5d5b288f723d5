import calendar
from datetime import date
from typing import Optional, Sequence

from pydantic import BaseModel

from glowboard.schemas.sales_record import SalesRecord
from glowboard.schemas.settings import LocationGoals
from glowboard.services.analytics.date_ranges import is_date_in_range, local_today, month_bounds


class GoalProgress(BaseModel):
    location: Optional[str] = None
    month: date

    total_service_sales: float = 0
    total_retail_sales: float = 0
    total_sales: float = 0

    service_goal: float = 0
    retail_goal: float = 0
    total_goal: float = 0

    total_progress_percentage: float = 0
    service_progress_percentage: float = 0
    retail_progress_percentage: float = 0

    remaining_amount: float = 0
    remaining_service_amount: float = 0
    remaining_retail_amount: float = 0

    days_in_month: int = 0
    days_remaining: int = 0
    daily_run_rate_needed: float = 0
    current_daily_average: float = 0
    on_track: bool = False


def progress_percentage(actual: float, goal: float) -> float:
    """Percent of goal reached, capped at 100."""
    if goal <= 0:
        return 0.0
    return min(actual / goal * 100, 100.0)


def remaining(goal: float, actual: float) -> float:
    return max(goal - actual, 0.0)


def progress_tier(percentage: float) -> str:
    if percentage >= 90:
        return "excellent"
    if percentage >= 70:
        return "good"
    if percentage >= 50:
        return "fair"
    return "behind"


def calculate_goal_progress(
    records: Sequence[SalesRecord],
    goals: LocationGoals,
    location: Optional[str] = None,
    today: Optional[date] = None
) -> GoalProgress:
    """Monthly goal progress for one location, or for all when location is None.

    Pace is a linear heuristic: the month is on track when the average per
    elapsed day reaches the daily amount still needed over the remaining days.
    """
    today = today or local_today()
    month_start, month_end = month_bounds(today)

    month_records = [
        record for record in records
        if is_date_in_range(record.date, month_start, month_end)
        and (location is None or record.location == location)
    ]

    total_service_sales = sum(record.daily_service_sales or 0 for record in month_records)
    total_retail_sales = sum(
        sum((record.retail_daily_sales or {}).values())
        for record in month_records
    )
    total_sales = total_service_sales + total_retail_sales

    if location:
        location_goal = goals.for_location(location)
        service_goal, retail_goal = location_goal.sales_goal, location_goal.retail_goal
    else:
        service_goal, retail_goal = goals.totals()
    total_goal = service_goal + retail_goal

    remaining_amount = remaining(total_goal, total_sales)

    days_in_month = calendar.monthrange(today.year, today.month)[1]
    days_remaining = max(days_in_month - today.day, 0)
    daily_run_rate_needed = remaining_amount / days_remaining if days_remaining > 0 else 0.0
    current_daily_average = total_sales / today.day

    return GoalProgress(
        location=location,
        month=month_start,
        total_service_sales=total_service_sales,
        total_retail_sales=total_retail_sales,
        total_sales=total_sales,
        service_goal=service_goal,
        retail_goal=retail_goal,
        total_goal=total_goal,
        total_progress_percentage=progress_percentage(total_sales, total_goal),
        service_progress_percentage=progress_percentage(total_service_sales, service_goal),
        retail_progress_percentage=progress_percentage(total_retail_sales, retail_goal),
        remaining_amount=remaining_amount,
        remaining_service_amount=remaining(service_goal, total_service_sales),
        remaining_retail_amount=remaining(retail_goal, total_retail_sales),
        days_in_month=days_in_month,
        days_remaining=days_remaining,
        daily_run_rate_needed=daily_run_rate_needed,
        current_daily_average=current_daily_average,
        on_track=current_daily_average >= daily_run_rate_needed,
    )
