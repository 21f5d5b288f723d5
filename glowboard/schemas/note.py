from datetime import date as date_type, datetime
from typing import Literal, Optional

from pydantic import BaseModel

Priority = Literal["low", "medium", "high"]


class NoteBase(BaseModel):
    location: str
    title: str
    content: str
    priority: Priority = "medium"
    visible_until: Optional[date_type] = None
    date: Optional[date_type] = None


class NoteCreate(NoteBase):
    pass


class NoteUpdate(BaseModel):
    location: Optional[str] = None
    title: Optional[str] = None
    content: Optional[str] = None
    priority: Optional[Priority] = None
    visible_until: Optional[date_type] = None
    date: Optional[date_type] = None


class Note(NoteBase):
    id: Optional[str] = None
    # Store-assigned; exposed as the note's creation date
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {
        "from_attributes": True
    }
