import math
from typing import List, Optional

from strawberry.types import Info

from glowboard.api.graphql.analytics.types import (
    DateRange,
    GoalProgress,
    LeaderboardEntry,
    LocationLeaderboard,
    PerformanceMetrics,
    ProductBreakdown,
    ProductShare,
    SalesStats,
    SellerRanking,
    ServiceBreakdown,
    ServiceSummary,
)
from glowboard.api.graphql.common.inputs import DateRangeInput
from glowboard.api.graphql.resolvers.base import BaseResolver
from glowboard.schemas.sales_record import SalesRecord
from glowboard.services.analytics import goal_progress, leaderboard, sales_stats
from glowboard.services.analytics.date_ranges import Timeframe, get_date_range
from glowboard.services.gateways.sales_records import SalesRecordGateway
from glowboard.services.sales_service import SalesDataService, goal_location
from glowboard.services.settings_service import LocationSettingsService


class AnalyticsResolver(BaseResolver):
    @classmethod
    async def load_records(cls, info: Info, location: str) -> List[SalesRecord]:
        """Sales records visible to the signed-in user for the selected location."""
        user = await cls.get_current_user(info)
        service = SalesDataService(
            SalesRecordGateway(cls.get_store_from_info(info)),
            await cls.get_audit_logger(info),
        )
        return await service.load(user, location)


def resolve_date_range(timeframe: Timeframe, custom_range: Optional[DateRangeInput]) -> DateRange:
    date_range = get_date_range(
        timeframe,
        custom_start=custom_range.start_date if custom_range else None,
        custom_end=custom_range.end_date if custom_range else None,
    )
    return DateRange(**date_range.model_dump())


async def resolve_sales_stats(info: Info, location: str, timeframe: Timeframe) -> SalesStats:
    records = await AnalyticsResolver.load_records(info, location)
    stats = sales_stats.calculate_sales_stats(records, timeframe)

    values = stats.model_dump()
    yoy_growth_is_infinite = math.isinf(stats.yoy_growth)
    values["yoy_growth"] = None if yoy_growth_is_infinite else stats.yoy_growth
    return SalesStats(yoy_growth_is_infinite=yoy_growth_is_infinite, **values)


async def resolve_performance_metrics(info: Info, location: str) -> PerformanceMetrics:
    records = await AnalyticsResolver.load_records(info, location)
    return PerformanceMetrics(**sales_stats.calculate_performance_metrics(records).model_dump())


async def resolve_product_breakdown(info: Info, location: str) -> ProductBreakdown:
    records = await AnalyticsResolver.load_records(info, location)
    summary = sales_stats.aggregate_product_breakdown(records)
    return ProductBreakdown(
        categories=[
            ProductShare(category=category, amount=amount, share=summary.shares[category])
            for category, amount in summary.totals.items()
        ],
        total=summary.total,
    )


async def resolve_service_breakdown(info: Info, location: str) -> ServiceBreakdown:
    records = await AnalyticsResolver.load_records(info, location)
    summary = sales_stats.aggregate_service_breakdown(records)
    return ServiceBreakdown(
        services=[ServiceSummary(**service.model_dump()) for service in summary.services],
        total_sales=summary.total_sales,
        total_appointments=summary.total_appointments,
    )


async def resolve_location_leaderboard(info: Info, location: str) -> LocationLeaderboard:
    records = await AnalyticsResolver.load_records(info, location)
    board = leaderboard.location_day_leaderboard(records)
    return LocationLeaderboard(
        entries=[LeaderboardEntry(**entry.model_dump()) for entry in board.entries],
        is_today=board.is_today,
        day=board.day,
    )


async def resolve_seller_leaderboard(info: Info, location: str, limit: int) -> List[SellerRanking]:
    records = await AnalyticsResolver.load_records(info, location)
    return [
        SellerRanking(**ranking.model_dump())
        for ranking in leaderboard.seller_leaderboard(records, limit=limit)
    ]


async def resolve_goal_progress(info: Info, location: str) -> GoalProgress:
    user = await AnalyticsResolver.get_current_user(info)
    records = await AnalyticsResolver.load_records(info, location)
    goals = await LocationSettingsService(AnalyticsResolver.get_store_from_info(info)).load_goals()

    progress = goal_progress.calculate_goal_progress(records, goals, goal_location(user, location))
    return GoalProgress(
        tier=goal_progress.progress_tier(progress.total_progress_percentage),
        **progress.model_dump(),
    )
