from typing import List

from glowboard.core.constants import NOTES_COLLECTION
from glowboard.schemas.note import Note
from glowboard.services.gateways.base import BaseGateway


class NoteGateway(BaseGateway[Note]):
    collection_name = NOTES_COLLECTION
    schema_class = Note

    async def get_by_location(self, location: str) -> List[Note]:
        documents = await self._run(
            "fetch",
            self.store.query(
                self.collection_name,
                filters=[("location", "==", location)],
                order_by="created_at",
                descending=True,
            ),
            "Failed to fetch notes by location",
        )
        return [self.to_schema(document) for document in documents]
