import strawberry
from strawberry.types import Info
from strawberry.scalars import ID

from glowboard.api.graphql.notes.types import Note, NoteInput
from glowboard.api.graphql.permissions import IsAuthenticated


@strawberry.type
class NoteMutation:
    @strawberry.mutation(permission_classes=[IsAuthenticated])
    async def create_note(self, info: Info, input: NoteInput) -> Note:
        from glowboard.api.graphql.notes.resolvers import resolve_create_note
        return await resolve_create_note(info, input)

    @strawberry.mutation(permission_classes=[IsAuthenticated])
    async def update_note(self, info: Info, id: ID, input: NoteInput) -> Note:
        from glowboard.api.graphql.notes.resolvers import resolve_update_note
        return await resolve_update_note(info, id, input)

    @strawberry.mutation(permission_classes=[IsAuthenticated])
    async def delete_note(self, info: Info, id: ID) -> bool:
        from glowboard.api.graphql.notes.resolvers import resolve_delete_note
        return await resolve_delete_note(info, id)
