import strawberry
from typing import List
from strawberry.types import Info

from glowboard.api.graphql.common.enums import NoteDateRange
from glowboard.api.graphql.notes.types import Note
from glowboard.api.graphql.permissions import IsAuthenticated


@strawberry.type
class NoteQuery:
    @strawberry.field(permission_classes=[IsAuthenticated])
    async def notes(
        self,
        info: Info,
        location: str = "all",
        priority: str = "all",
        date_range: NoteDateRange = NoteDateRange.ALL
    ) -> List[Note]:
        from glowboard.api.graphql.notes.resolvers import resolve_notes
        return await resolve_notes(info, location, priority, date_range)
