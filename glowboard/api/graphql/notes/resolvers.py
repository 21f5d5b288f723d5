from typing import Any, Dict, List

from strawberry.types import Info

from glowboard.api.graphql.common.enums import NoteDateRange, NotePriority
from glowboard.api.graphql.notes.types import Note, NoteInput
from glowboard.api.graphql.resolvers.base import BaseResolver
from glowboard.schemas.note import Note as NoteSchema
from glowboard.services.gateways.notes import NoteGateway
from glowboard.services.note_service import NoteService, filter_notes


class NoteResolver(BaseResolver):
    @classmethod
    async def get_service(cls, info: Info) -> NoteService:
        return NoteService(
            NoteGateway(cls.get_store_from_info(info)),
            await cls.get_audit_logger(info),
        )

    @classmethod
    def to_graphql_type(cls, note: NoteSchema) -> Note:
        return Note(
            id=note.id,
            location=note.location,
            title=note.title,
            content=note.content,
            priority=NotePriority(note.priority),
            visible_until=note.visible_until,
            date=note.date,
            created_date=note.created_at,
            updated_at=note.updated_at,
        )


def input_to_dict(input: NoteInput) -> Dict[str, Any]:
    data = {name: value for name, value in vars(input).items() if value is not None}
    if "priority" in data:
        data["priority"] = data["priority"].value
    return data


async def resolve_notes(info: Info, location: str, priority: str, date_range: NoteDateRange) -> List[Note]:
    user = await NoteResolver.get_current_user(info)
    service = await NoteResolver.get_service(info)
    notes = filter_notes(
        await service.list_visible(user),
        location=location,
        priority=priority,
        date_range=date_range.value,
    )
    return [NoteResolver.to_graphql_type(note) for note in notes]


async def resolve_create_note(info: Info, input: NoteInput) -> Note:
    user = await NoteResolver.get_current_user(info)
    service = await NoteResolver.get_service(info)
    data = input_to_dict(input)
    data.setdefault("priority", NotePriority.MEDIUM.value)
    note = await service.create(user, data)
    return NoteResolver.to_graphql_type(note)


async def resolve_update_note(info: Info, id: str, input: NoteInput) -> Note:
    user = await NoteResolver.get_current_user(info)
    service = await NoteResolver.get_service(info)
    note = await service.update(user, str(id), input_to_dict(input))
    return NoteResolver.to_graphql_type(note)


async def resolve_delete_note(info: Info, id: str) -> bool:
    user = await NoteResolver.get_current_user(info)
    service = await NoteResolver.get_service(info)
    await service.delete(user, str(id))
    return True
