from typing import List, Optional
import strawberry
from strawberry.scalars import ID

from glowboard.api.graphql.common.inputs import CategoryAmountInput
from glowboard.api.graphql.common.types import CategoryAmount
from glowboard.api.graphql.types.scalars import Date, DateTime


@strawberry.type
class ServiceLine:
    service: str
    appointments: float
    sales: float


@strawberry.type
class TopSeller:
    name: str
    sales: float
    location: Optional[str] = None


@strawberry.type
class SalesRecord:
    id: ID
    location: str
    date: Date
    retail_daily_sales: List[CategoryAmount]
    product_breakdown: List[CategoryAmount]
    service_breakdown: List[ServiceLine]
    top_sellers: List[TopSeller]
    daily_sales: Optional[float] = None
    treatments_count: Optional[int] = None
    daily_service_sales: Optional[float] = None
    number_of_clients: Optional[int] = None
    number_of_appointments: Optional[int] = None
    membership_count: Optional[int] = None
    membership_revenue: Optional[float] = None
    total_appointments: Optional[int] = None
    conversion_rate: Optional[float] = None
    average_ticket: Optional[float] = None
    notes: Optional[str] = None
    created_at: Optional[DateTime] = None
    updated_at: Optional[DateTime] = None


@strawberry.input
class ServiceLineInput:
    service: str
    appointments: float = 0
    sales: float = 0


@strawberry.input
class TopSellerInput:
    name: str
    sales: float = 0
    location: Optional[str] = None


@strawberry.input
class SalesRecordInput:
    """Sales form values; fields left out are not written."""
    location: Optional[str] = None
    date: Optional[Date] = None
    daily_sales: Optional[float] = None
    treatments_count: Optional[float] = None
    daily_service_sales: Optional[float] = None
    retail_daily_sales: Optional[List[CategoryAmountInput]] = None
    number_of_clients: Optional[int] = None
    number_of_appointments: Optional[int] = None
    membership_count: Optional[int] = None
    membership_revenue: Optional[float] = None
    product_breakdown: Optional[List[CategoryAmountInput]] = None
    service_breakdown: Optional[List[ServiceLineInput]] = None
    top_sellers: Optional[List[TopSellerInput]] = None
    total_appointments: Optional[int] = None
    conversion_rate: Optional[float] = None
    average_ticket: Optional[float] = None
    notes: Optional[str] = None
