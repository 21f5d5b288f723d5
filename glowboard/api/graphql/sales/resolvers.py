from typing import Any, Dict, List

from strawberry.types import Info

from glowboard.api.graphql.common.types import CategoryAmount
from glowboard.api.graphql.resolvers.base import BaseResolver
from glowboard.api.graphql.sales.types import (
    SalesRecord,
    SalesRecordInput,
    ServiceLine,
    TopSeller,
)
from glowboard.schemas.sales_record import SalesRecord as SalesRecordSchema
from glowboard.services.gateways.sales_records import SalesRecordGateway
from glowboard.services.sales_service import SalesDataService


class SalesRecordResolver(BaseResolver):
    @classmethod
    async def get_service(cls, info: Info) -> SalesDataService:
        return SalesDataService(
            SalesRecordGateway(cls.get_store_from_info(info)),
            await cls.get_audit_logger(info),
        )

    @classmethod
    def to_graphql_type(cls, record: SalesRecordSchema) -> SalesRecord:
        return SalesRecord(
            id=record.id,
            location=record.location,
            date=record.date,
            retail_daily_sales=[
                CategoryAmount(category=category, amount=amount)
                for category, amount in (record.retail_daily_sales or {}).items()
            ],
            product_breakdown=[
                CategoryAmount(category=category, amount=amount)
                for category, amount in (record.product_breakdown or {}).items()
            ],
            service_breakdown=[
                ServiceLine(service=service, appointments=line.appointments, sales=line.sales)
                for service, line in (record.service_breakdown or {}).items()
            ],
            top_sellers=[
                TopSeller(name=seller.name, sales=seller.sales, location=seller.location)
                for seller in (record.top_sellers or [])
            ],
            daily_sales=record.daily_sales,
            treatments_count=record.treatments_count,
            daily_service_sales=record.daily_service_sales,
            number_of_clients=record.number_of_clients,
            number_of_appointments=record.number_of_appointments,
            membership_count=record.membership_count,
            membership_revenue=record.membership_revenue,
            total_appointments=record.total_appointments,
            conversion_rate=record.conversion_rate,
            average_ticket=record.average_ticket,
            notes=record.notes,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )


def input_to_dict(input: SalesRecordInput) -> Dict[str, Any]:
    """Convert the GraphQL input to service data, leaving out unset fields."""
    data: Dict[str, Any] = {}
    for name, value in vars(input).items():
        if value is None:
            continue
        if name in ("retail_daily_sales", "product_breakdown"):
            value = {entry.category: entry.amount for entry in value}
        elif name == "service_breakdown":
            value = {
                entry.service: {"appointments": entry.appointments, "sales": entry.sales}
                for entry in value
            }
        elif name == "top_sellers":
            value = [
                {"name": seller.name, "sales": seller.sales, "location": seller.location}
                for seller in value
            ]
        data[name] = value
    return data


async def resolve_sales_records(info: Info, location: str) -> List[SalesRecord]:
    user = await SalesRecordResolver.get_current_user(info)
    service = await SalesRecordResolver.get_service(info)
    records = await service.load(user, location)
    return [SalesRecordResolver.to_graphql_type(record) for record in records]


async def resolve_create_sales_record(info: Info, input: SalesRecordInput) -> SalesRecord:
    user = await SalesRecordResolver.get_current_user(info)
    service = await SalesRecordResolver.get_service(info)
    record = await service.create(user, input_to_dict(input))
    return SalesRecordResolver.to_graphql_type(record)


async def resolve_update_sales_record(info: Info, id: str, input: SalesRecordInput) -> SalesRecord:
    user = await SalesRecordResolver.get_current_user(info)
    service = await SalesRecordResolver.get_service(info)
    record = await service.update(user, str(id), input_to_dict(input))
    return SalesRecordResolver.to_graphql_type(record)


async def resolve_delete_sales_record(info: Info, id: str) -> bool:
    user = await SalesRecordResolver.get_current_user(info)
    service = await SalesRecordResolver.get_service(info)
    await service.delete(user, str(id))
    return True
