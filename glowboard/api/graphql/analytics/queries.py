import strawberry
from typing import List, Optional
from strawberry.types import Info

from glowboard.api.graphql.analytics.types import (
    DateRange,
    GoalProgress,
    LocationLeaderboard,
    PerformanceMetrics,
    ProductBreakdown,
    SalesStats,
    SellerRanking,
    ServiceBreakdown,
)
from glowboard.api.graphql.common.enums import Timeframe
from glowboard.api.graphql.common.inputs import DateRangeInput
from glowboard.api.graphql.permissions import IsAuthenticated


@strawberry.type
class AnalyticsQuery:
    @strawberry.field
    def date_range(
        self,
        timeframe: Timeframe,
        custom_range: Optional[DateRangeInput] = None
    ) -> DateRange:
        from glowboard.api.graphql.analytics.resolvers import resolve_date_range
        return resolve_date_range(timeframe, custom_range)

    @strawberry.field(permission_classes=[IsAuthenticated])
    async def sales_stats(
        self,
        info: Info,
        location: str = "all",
        timeframe: Timeframe = Timeframe.SEVEN_DAYS
    ) -> SalesStats:
        from glowboard.api.graphql.analytics.resolvers import resolve_sales_stats
        return await resolve_sales_stats(info, location, timeframe)

    @strawberry.field(permission_classes=[IsAuthenticated])
    async def performance_metrics(self, info: Info, location: str = "all") -> PerformanceMetrics:
        from glowboard.api.graphql.analytics.resolvers import resolve_performance_metrics
        return await resolve_performance_metrics(info, location)

    @strawberry.field(permission_classes=[IsAuthenticated])
    async def product_breakdown(self, info: Info, location: str = "all") -> ProductBreakdown:
        from glowboard.api.graphql.analytics.resolvers import resolve_product_breakdown
        return await resolve_product_breakdown(info, location)

    @strawberry.field(permission_classes=[IsAuthenticated])
    async def service_breakdown(self, info: Info, location: str = "all") -> ServiceBreakdown:
        from glowboard.api.graphql.analytics.resolvers import resolve_service_breakdown
        return await resolve_service_breakdown(info, location)

    @strawberry.field(permission_classes=[IsAuthenticated])
    async def location_leaderboard(self, info: Info, location: str = "all") -> LocationLeaderboard:
        from glowboard.api.graphql.analytics.resolvers import resolve_location_leaderboard
        return await resolve_location_leaderboard(info, location)

    @strawberry.field(permission_classes=[IsAuthenticated])
    async def seller_leaderboard(
        self,
        info: Info,
        location: str = "all",
        limit: int = 10
    ) -> List[SellerRanking]:
        from glowboard.api.graphql.analytics.resolvers import resolve_seller_leaderboard
        return await resolve_seller_leaderboard(info, location, limit)

    @strawberry.field(permission_classes=[IsAuthenticated])
    async def goal_progress(self, info: Info, location: str = "all") -> GoalProgress:
        from glowboard.api.graphql.analytics.resolvers import resolve_goal_progress
        return await resolve_goal_progress(info, location)
