from datetime import date
from typing import List

from glowboard.core.constants import SALES_RECORDS_COLLECTION
from glowboard.schemas.sales_record import SalesRecord
from glowboard.services.gateways.base import BaseGateway


class SalesRecordGateway(BaseGateway[SalesRecord]):
    collection_name = SALES_RECORDS_COLLECTION
    schema_class = SalesRecord

    async def get_by_location(self, location: str) -> List[SalesRecord]:
        """Records of one location, newest day first, filtered by the store."""
        documents = await self._run(
            "fetch",
            self.store.query(
                self.collection_name,
                filters=[("location", "==", location)],
                order_by="date",
                descending=True,
            ),
            "Failed to fetch sales by location",
        )
        return [self.to_schema(document) for document in documents]

    async def get_by_date_range(self, start: date, end: date) -> List[SalesRecord]:
        """Records dated within [start, end], newest day first, filtered by the store."""
        documents = await self._run(
            "fetch",
            self.store.query(
                self.collection_name,
                filters=[
                    ("date", ">=", start.isoformat()),
                    ("date", "<=", end.isoformat()),
                ],
                order_by="date",
                descending=True,
            ),
            "Failed to fetch sales by date range",
        )
        return [self.to_schema(document) for document in documents]
