import strawberry
from typing import List
from strawberry.types import Info

from glowboard.api.graphql.permissions import IsAuthenticated
from glowboard.api.graphql.sales.types import SalesRecord


@strawberry.type
class SalesQuery:
    @strawberry.field(permission_classes=[IsAuthenticated])
    async def sales_records(self, info: Info, location: str = "all") -> List[SalesRecord]:
        from glowboard.api.graphql.sales.resolvers import resolve_sales_records
        return await resolve_sales_records(info, location)
