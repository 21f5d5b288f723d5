import logging
from datetime import date
from typing import Any, List, Mapping, Optional, Union

from pydantic import BaseModel

from glowboard.core.constants import ALL_LOCATIONS
from glowboard.core.exceptions import InputValidationError
from glowboard.schemas.sales_record import SalesRecord, SalesRecordCreate, SalesRecordUpdate
from glowboard.schemas.settings import LocationGoals
from glowboard.schemas.user import User
from glowboard.services.analytics.date_ranges import Timeframe, local_today
from glowboard.services.analytics.goal_progress import GoalProgress, calculate_goal_progress
from glowboard.services.analytics.leaderboard import (
    LocationDayLeaderboard,
    SellerRanking,
    location_day_leaderboard,
    seller_leaderboard,
)
from glowboard.services.analytics.sales_stats import (
    PerformanceMetrics,
    ProductBreakdownSummary,
    SalesStats,
    ServiceBreakdownSummary,
    aggregate_product_breakdown,
    aggregate_service_breakdown,
    calculate_performance_metrics,
    calculate_sales_stats,
    filter_sales_by_location,
)
from glowboard.services.audit import AuditLogger
from glowboard.services.gateways.sales_records import SalesRecordGateway
from glowboard.services.permissions import check_location_access
from glowboard.services.validation import validate_sales_record

logger = logging.getLogger(__name__)


class SalesDashboard(BaseModel):
    stats: SalesStats
    performance: PerformanceMetrics
    product_breakdown: ProductBreakdownSummary
    service_breakdown: ServiceBreakdownSummary
    location_leaderboard: LocationDayLeaderboard
    seller_leaderboard: List[SellerRanking]
    goal_progress: GoalProgress


def goal_location(user: User, selected_location: str) -> Optional[str]:
    """Location whose goals apply; None means the sum over all locations."""
    if selected_location != ALL_LOCATIONS:
        return selected_location
    return None if user.is_admin else user.location


class SalesDataService:
    """Loads sales records for a user and runs every sales mutation.

    Writes are validated first, then checked against the caller's location,
    then stored; an audit event follows each successful write.
    """

    def __init__(self, gateway: SalesRecordGateway, audit: AuditLogger):
        self.gateway = gateway
        self.audit = audit

    async def load(self, user: User, selected_location: str = ALL_LOCATIONS) -> List[SalesRecord]:
        records = await self.gateway.list()
        return filter_sales_by_location(records, selected_location, user.location, user.is_admin)

    async def dashboard(
        self,
        user: User,
        goals: LocationGoals,
        selected_location: str = ALL_LOCATIONS,
        timeframe: Union[str, Timeframe] = Timeframe.SEVEN_DAYS,
        today: Optional[date] = None
    ) -> SalesDashboard:
        today = today or local_today()
        records = await self.load(user, selected_location)

        return SalesDashboard(
            stats=calculate_sales_stats(records, timeframe, today=today),
            performance=calculate_performance_metrics(records),
            product_breakdown=aggregate_product_breakdown(records),
            service_breakdown=aggregate_service_breakdown(records),
            location_leaderboard=location_day_leaderboard(records, today=today),
            seller_leaderboard=seller_leaderboard(records),
            goal_progress=calculate_goal_progress(
                records, goals, goal_location(user, selected_location), today=today
            ),
        )

    async def create(
        self,
        user: User,
        data: Mapping[str, Any],
        today: Optional[date] = None
    ) -> SalesRecord:
        result = validate_sales_record(data, today=today)
        if not result.is_valid:
            raise InputValidationError(result.errors)
        check_location_access(user, result.sanitized_value["location"])

        record = await self.gateway.create(
            SalesRecordCreate.model_validate({**data, **result.sanitized_value})
        )
        logger.info(f"Created sales record {record.id} for {record.location} on {record.date}")
        self.audit.log_sales_record("create", record.id, None, record)
        return record

    async def update(
        self,
        user: User,
        id: str,
        data: Mapping[str, Any],
        today: Optional[date] = None
    ) -> SalesRecord:
        existing = await self.gateway.get(id)
        check_location_access(user, existing.location)

        merged = {**existing.model_dump(), **data}
        result = validate_sales_record(merged, today=today)
        if not result.is_valid:
            raise InputValidationError(result.errors)
        check_location_access(user, result.sanitized_value["location"])

        changes = {
            key: result.sanitized_value.get(key, value)
            for key, value in data.items()
        }
        record = await self.gateway.update(id, SalesRecordUpdate.model_validate(changes))
        self.audit.log_sales_record("update", id, existing, record)
        return record

    async def delete(self, user: User, id: str) -> None:
        existing = await self.gateway.get(id)
        check_location_access(user, existing.location)

        await self.gateway.delete(id)
        logger.info(f"Deleted sales record {id}")
        self.audit.log_sales_record("delete", id, existing, None)
