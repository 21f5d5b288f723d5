from datetime import date

import pytest

from glowboard.schemas.sales_record import SalesRecord
from glowboard.services.analytics.sales_stats import (
    aggregate_product_breakdown,
    aggregate_service_breakdown,
    calculate_performance_metrics,
    calculate_sales_stats,
    filter_sales_by_location,
    percent_change,
)

TODAY = date(2024, 5, 15)


def record(location, day, daily_sales=None, treatments_count=None, **extra):
    return SalesRecord(
        location=location,
        date=day,
        daily_sales=daily_sales,
        treatments_count=treatments_count,
        **extra,
    )


@pytest.mark.parametrize("timeframe", ["yesterday", "1day", "7days", "1month", "1quarter", "6months", "1year"])
def test_empty_input_is_all_zero(timeframe):
    """Test that no records yield zero stats for every timeframe"""
    stats = calculate_sales_stats([], timeframe, today=TODAY)

    assert stats.today_sales == 0
    assert stats.week_sales == 0
    assert stats.month_sales == 0
    assert stats.growth == 0
    assert stats.yoy_growth == 0
    assert stats.total_treatments == 0
    assert stats.avg_daily == 0


def test_treatments_and_average_cover_all_records():
    """Test totals and averages over a two-location day"""
    data = [
        record("Flatiron", date(2023, 12, 1), 1000, 10),
        record("Midtown", date(2023, 12, 1), 1500, 15),
    ]

    stats = calculate_sales_stats(data, "7days", today=TODAY)

    assert stats.total_treatments == 25
    assert stats.avg_daily == 1250


def test_growth_is_zero_without_yesterday_sales():
    """Test that day-over-day growth needs yesterday's sales"""
    stats = calculate_sales_stats([record("UWS", TODAY, 900)], "1day", today=TODAY)

    assert stats.today_sales == 900
    assert stats.yesterday_sales == 0
    assert stats.growth == 0


def test_day_over_day_growth():
    """Test growth percentage between yesterday and today"""
    data = [record("UWS", TODAY, 1200), record("UWS", date(2024, 5, 14), 1000)]

    stats = calculate_sales_stats(data, "1day", today=TODAY)

    assert stats.growth == pytest.approx(20.0)


def test_year_over_year_growth():
    """Test year-over-year growth against the same window last year"""
    data = [record("UWS", TODAY, 1500), record("UWS", date(2023, 5, 15), 1000)]

    stats = calculate_sales_stats(data, "1day", today=TODAY)

    assert stats.current_period_sales == 1500
    assert stats.last_year_period_sales == 1000
    assert stats.yoy_growth == pytest.approx(50.0)


def test_year_over_year_growth_without_last_year():
    """Test that a period with no prior-year sales grows infinitely"""
    stats = calculate_sales_stats([record("UWS", TODAY, 500)], "1day", today=TODAY)

    assert stats.yoy_growth == float("inf")
    assert percent_change(0, 0) == 0


def test_week_and_month_totals_ignore_timeframe():
    """Test that the rolling week and calendar month do not follow the timeframe"""
    data = [
        record("UWS", date(2024, 5, 9), 100),
        record("UWS", date(2024, 5, 8), 200),
        record("UWS", date(2024, 4, 30), 400),
    ]

    stats = calculate_sales_stats(data, "1year", today=TODAY)

    assert stats.week_sales == 100
    assert stats.month_sales == 300
    assert stats.current_period_sales == 700
    assert stats.timeframe_label == "This Year"


def test_filter_sales_by_location():
    """Test role-aware location filtering"""
    data = [record("Flatiron", TODAY, 1), record("Midtown", TODAY, 2), record("UWS", TODAY, 3)]

    assert filter_sales_by_location(data, "all", "Midtown", is_admin=True) == data
    assert [r.location for r in filter_sales_by_location(data, "all", "Midtown")] == ["Midtown"]
    assert [r.location for r in filter_sales_by_location(data, "UWS", "Midtown")] == ["UWS"]
    assert [r.location for r in filter_sales_by_location(data, "UWS", "Midtown", is_admin=True)] == ["UWS"]


def test_performance_metrics():
    """Test per-treatment and per-record averages"""
    metrics = calculate_performance_metrics([
        record("UWS", TODAY, 1000, 4),
        record("UWS", date(2024, 5, 14), 500, 0),
    ])

    assert metrics.total_sales == 1500
    assert metrics.avg_sales_per_treatment == 375
    assert metrics.avg_daily_sales == 750
    assert calculate_performance_metrics([]).avg_sales_per_treatment == 0


def test_product_breakdown_shares():
    """Test category totals and their share of the total"""
    summary = aggregate_product_breakdown([
        record("UWS", TODAY, product_breakdown={"skincare": 300, "devices": 100}),
        record("UWS", date(2024, 5, 14), product_breakdown={"skincare": 100}),
        record("UWS", date(2024, 5, 13)),
    ])

    assert summary.totals["skincare"] == 400
    assert summary.total == 500
    assert summary.shares["skincare"] == pytest.approx(80.0)
    assert summary.shares["gift_cards"] == 0


def test_service_breakdown_skips_services_without_sales():
    """Test service aggregation order and filtering"""
    summary = aggregate_service_breakdown([
        record("UWS", TODAY, service_breakdown={
            "filler": {"appointments": 2, "sales": 1600},
            "botox": {"appointments": 4, "sales": 2000},
            "consultation": {"appointments": 3, "sales": 0},
        }),
    ])

    assert [s.service for s in summary.services] == ["botox", "filler"]
    assert summary.services[0].average_ticket == 500
    assert summary.total_appointments == 9
