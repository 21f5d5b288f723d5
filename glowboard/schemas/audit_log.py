from datetime import datetime
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel

ActionType = Literal[
    "create",
    "update",
    "delete",
    "login",
    "logout",
    "user_created",
    "user_updated",
]
EntityType = Literal["SalesRecord", "Note", "User"]


class AuditLogCreate(BaseModel):
    user_email: str
    action_type: ActionType
    entity_type: Optional[EntityType] = None
    entity_id: Optional[str] = None
    old_values: Optional[Dict[str, Any]] = None
    new_values: Optional[Dict[str, Any]] = None
    location: str = "System"
    ip_address: str = "Unknown"
    details: Optional[str] = None


class AuditLog(AuditLogCreate):
    id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {
        "from_attributes": True
    }
