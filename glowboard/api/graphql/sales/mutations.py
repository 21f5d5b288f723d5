import strawberry
from strawberry.types import Info
from strawberry.scalars import ID

from glowboard.api.graphql.permissions import IsAuthenticated
from glowboard.api.graphql.sales.types import SalesRecord, SalesRecordInput


@strawberry.type
class SalesMutation:
    @strawberry.mutation(permission_classes=[IsAuthenticated])
    async def create_sales_record(self, info: Info, input: SalesRecordInput) -> SalesRecord:
        from glowboard.api.graphql.sales.resolvers import resolve_create_sales_record
        return await resolve_create_sales_record(info, input)

    @strawberry.mutation(permission_classes=[IsAuthenticated])
    async def update_sales_record(self, info: Info, id: ID, input: SalesRecordInput) -> SalesRecord:
        from glowboard.api.graphql.sales.resolvers import resolve_update_sales_record
        return await resolve_update_sales_record(info, id, input)

    @strawberry.mutation(permission_classes=[IsAuthenticated])
    async def delete_sales_record(self, info: Info, id: ID) -> bool:
        from glowboard.api.graphql.sales.resolvers import resolve_delete_sales_record
        return await resolve_delete_sales_record(info, id)
