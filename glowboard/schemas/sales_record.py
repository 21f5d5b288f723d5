from datetime import date as date_type, datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class TopSeller(BaseModel):
    name: str
    sales: float = 0
    location: Optional[str] = None


class ServiceLine(BaseModel):
    appointments: float = 0
    sales: float = 0


# Base model for common attributes
class SalesRecordBase(BaseModel):
    location: str
    date: date_type

    daily_sales: Optional[float] = None
    treatments_count: Optional[int] = None

    daily_service_sales: Optional[float] = None
    retail_daily_sales: Dict[str, float] = Field(default_factory=dict)
    number_of_clients: Optional[int] = None
    number_of_appointments: Optional[int] = None

    membership_count: Optional[int] = None
    membership_revenue: Optional[float] = None

    product_breakdown: Optional[Dict[str, float]] = None
    service_breakdown: Optional[Dict[str, ServiceLine]] = None
    top_sellers: Optional[List[TopSeller]] = None

    total_appointments: Optional[int] = None
    conversion_rate: Optional[float] = None
    average_ticket: Optional[float] = None

    notes: Optional[str] = None


# Model for creating a new record (input)
class SalesRecordCreate(SalesRecordBase):
    pass


# Model for an edit; only supplied fields are written
class SalesRecordUpdate(BaseModel):
    location: Optional[str] = None
    date: Optional[date_type] = None
    daily_sales: Optional[float] = None
    treatments_count: Optional[int] = None
    daily_service_sales: Optional[float] = None
    retail_daily_sales: Optional[Dict[str, float]] = None
    number_of_clients: Optional[int] = None
    number_of_appointments: Optional[int] = None
    membership_count: Optional[int] = None
    membership_revenue: Optional[float] = None
    product_breakdown: Optional[Dict[str, float]] = None
    service_breakdown: Optional[Dict[str, ServiceLine]] = None
    top_sellers: Optional[List[TopSeller]] = None
    total_appointments: Optional[int] = None
    conversion_rate: Optional[float] = None
    average_ticket: Optional[float] = None
    notes: Optional[str] = None


# Model for reading a stored record (output, includes ID)
class SalesRecord(SalesRecordBase):
    id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {
        "from_attributes": True
    }
