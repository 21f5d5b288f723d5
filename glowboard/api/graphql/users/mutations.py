import strawberry
from strawberry.types import Info
from strawberry.scalars import ID

from glowboard.api.graphql.permissions import IsAdmin
from glowboard.api.graphql.users.types import InviteUserInput, User


@strawberry.type
class UserMutation:
    @strawberry.mutation(permission_classes=[IsAdmin])
    async def invite_user(self, info: Info, input: InviteUserInput) -> User:
        from glowboard.api.graphql.users.resolvers import resolve_invite_user
        return await resolve_invite_user(info, input)

    @strawberry.mutation(permission_classes=[IsAdmin])
    async def update_user_admin(self, info: Info, user_id: ID, is_admin: bool) -> User:
        from glowboard.api.graphql.users.resolvers import resolve_update_user_admin
        return await resolve_update_user_admin(info, user_id, is_admin)

    @strawberry.mutation(permission_classes=[IsAdmin])
    async def update_user_location(self, info: Info, user_id: ID, location: str) -> User:
        from glowboard.api.graphql.users.resolvers import resolve_update_user_location
        return await resolve_update_user_location(info, user_id, location)

    @strawberry.mutation(permission_classes=[IsAdmin])
    async def delete_user(self, info: Info, user_id: ID) -> bool:
        from glowboard.api.graphql.users.resolvers import resolve_delete_user
        return await resolve_delete_user(info, user_id)

    @strawberry.mutation(permission_classes=[IsAdmin])
    async def promote_to_admin(self, info: Info, email: str) -> User:
        from glowboard.api.graphql.users.resolvers import resolve_promote_to_admin
        return await resolve_promote_to_admin(info, email)
