import strawberry
from typing import Optional
from strawberry.scalars import ID

from glowboard.api.graphql.common.enums import NotePriority
from glowboard.api.graphql.types.scalars import Date, DateTime


@strawberry.type
class Note:
    id: ID
    location: str
    title: str
    content: str
    priority: NotePriority
    visible_until: Optional[Date] = None
    date: Optional[Date] = None
    created_date: Optional[DateTime] = None
    updated_at: Optional[DateTime] = None


@strawberry.input
class NoteInput:
    location: Optional[str] = None
    title: Optional[str] = None
    content: Optional[str] = None
    priority: Optional[NotePriority] = None
    visible_until: Optional[Date] = None
    date: Optional[Date] = None
