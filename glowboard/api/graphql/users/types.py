import strawberry
from typing import Optional
from strawberry.scalars import ID, JSON

from glowboard.api.graphql.types.scalars import DateTime


@strawberry.type
class User:
    id: ID
    email: str
    full_name: str
    is_admin: bool
    location: Optional[str] = None
    created_at: Optional[DateTime] = None


@strawberry.type
class AuditLog:
    id: ID
    user_email: str
    action_type: str
    location: str
    ip_address: str
    entity_type: Optional[str] = None
    entity_id: Optional[str] = None
    old_values: Optional[JSON] = None
    new_values: Optional[JSON] = None
    details: Optional[str] = None
    created_at: Optional[DateTime] = None


@strawberry.input
class InviteUserInput:
    email: str
    full_name: str = ""
    location: Optional[str] = None
    is_admin: bool = False
