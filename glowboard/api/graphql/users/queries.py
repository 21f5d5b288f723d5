import strawberry
from typing import List
from strawberry.types import Info

from glowboard.api.graphql.permissions import IsAdmin
from glowboard.api.graphql.users.types import AuditLog, User


@strawberry.type
class UserQuery:
    @strawberry.field
    async def me(self, info: Info) -> User:
        from glowboard.api.graphql.users.resolvers import resolve_me
        return await resolve_me(info)

    @strawberry.field(permission_classes=[IsAdmin])
    async def users(self, info: Info) -> List[User]:
        from glowboard.api.graphql.users.resolvers import resolve_users
        return await resolve_users(info)

    @strawberry.field(permission_classes=[IsAdmin])
    async def audit_logs(self, info: Info, limit: int = 100) -> List[AuditLog]:
        from glowboard.api.graphql.users.resolvers import resolve_audit_logs
        return await resolve_audit_logs(info, limit)
