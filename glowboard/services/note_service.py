import logging
from datetime import date, datetime, timedelta
from typing import Any, List, Mapping, Optional, Sequence

from glowboard.core.config import get_settings
from glowboard.core.constants import ALL_LOCATIONS
from glowboard.core.exceptions import InputValidationError
from glowboard.schemas.note import Note, NoteCreate, NoteUpdate
from glowboard.schemas.user import User
from glowboard.services.analytics.date_ranges import local_today
from glowboard.services.audit import AuditLogger
from glowboard.services.gateways.notes import NoteGateway
from glowboard.services.permissions import check_location_access
from glowboard.services.validation import validate_note

logger = logging.getLogger(__name__)
settings = get_settings()

# Dashboard date filter over the creation date
NOTE_DATE_RANGES = ("all", "today", "week", "month")


def _created_day(note: Note) -> Optional[date]:
    return note.created_at.date() if note.created_at else None


def _newest_first_key(note: Note) -> datetime:
    created = note.created_at or datetime.min
    # Compare naive and aware timestamps on the same footing
    return created.replace(tzinfo=None)


def filter_notes(
    notes: Sequence[Note],
    location: str = ALL_LOCATIONS,
    priority: str = "all",
    date_range: str = "all",
    today: Optional[date] = None
) -> List[Note]:
    today = today or local_today()
    filtered = []
    for note in notes:
        if location != ALL_LOCATIONS and note.location != location:
            continue
        if priority != "all" and note.priority != priority:
            continue
        if date_range != "all":
            created = _created_day(note)
            if created is None:
                continue
            if date_range == "today" and created != today:
                continue
            if date_range == "week" and created < today - timedelta(days=7):
                continue
            if date_range == "month" and created < today - timedelta(days=30):
                continue
        filtered.append(note)
    return filtered


class NoteService:
    def __init__(self, gateway: NoteGateway, audit: AuditLogger):
        self.gateway = gateway
        self.audit = audit

    async def list_visible(self, user: User, today: Optional[date] = None) -> List[Note]:
        """Notes the user may see, newest first.

        Notes whose visible_until day has passed are hidden from everyone.
        Non-admins only see notes of their own location.
        """
        today = today or local_today()
        own_location = user.location or settings.DEFAULT_USER_LOCATION

        notes = [
            note for note in await self.gateway.list()
            if not (note.visible_until and note.visible_until < today)
            and (user.is_admin or note.location == own_location)
        ]
        return sorted(notes, key=_newest_first_key, reverse=True)

    async def create(self, user: User, data: Mapping[str, Any], today: Optional[date] = None) -> Note:
        data = dict(data)
        if not user.is_admin:
            data["location"] = user.location or settings.DEFAULT_USER_LOCATION

        result = validate_note(data, today=today)
        if not result.is_valid:
            raise InputValidationError(result.errors)

        note = await self.gateway.create(NoteCreate.model_validate({**data, **result.sanitized_value}))
        self.audit.log_note("create", note.id, None, note)
        return note

    async def update(self, user: User, id: str, data: Mapping[str, Any], today: Optional[date] = None) -> Note:
        existing = await self.gateway.get(id)
        check_location_access(user, existing.location)

        result = validate_note({**existing.model_dump(), **data}, today=today)
        if not result.is_valid:
            raise InputValidationError(result.errors)
        check_location_access(user, result.sanitized_value["location"])

        changes = {
            key: result.sanitized_value.get(key, value)
            for key, value in data.items()
        }
        note = await self.gateway.update(id, NoteUpdate.model_validate(changes))
        self.audit.log_note("update", id, existing, note)
        return note

    async def delete(self, user: User, id: str) -> None:
        existing = await self.gateway.get(id)
        check_location_access(user, existing.location)

        await self.gateway.delete(id)
        self.audit.log_note("delete", id, existing, None)
