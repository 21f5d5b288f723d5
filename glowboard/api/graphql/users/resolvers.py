from typing import List

from strawberry.types import Info

from glowboard.api.graphql.resolvers.base import BaseResolver
from glowboard.api.graphql.users.types import AuditLog, InviteUserInput, User
from glowboard.schemas.audit_log import AuditLog as AuditLogSchema
from glowboard.schemas.user import User as UserSchema
from glowboard.services.gateways.audit_logs import AuditLogGateway
from glowboard.services.user_service import UserManagementService


class UserResolver(BaseResolver):
    @classmethod
    async def get_service(cls, info: Info) -> UserManagementService:
        return UserManagementService(cls.get_user_gateway(info), await cls.get_audit_logger(info))

    @classmethod
    def to_graphql_type(cls, user: UserSchema) -> User:
        return User(
            id=user.id,
            email=user.email,
            full_name=user.full_name,
            is_admin=user.is_admin,
            location=user.location,
            created_at=user.created_at,
        )


def to_audit_log_type(entry: AuditLogSchema) -> AuditLog:
    return AuditLog(**entry.model_dump(exclude={"updated_at"}))


async def resolve_me(info: Info) -> User:
    """Resolver for the me query that returns the signed-in user."""
    user = await UserResolver.get_current_user(info)
    return UserResolver.to_graphql_type(user)


async def resolve_users(info: Info) -> List[User]:
    actor = await UserResolver.get_current_user(info)
    service = await UserResolver.get_service(info)
    return [UserResolver.to_graphql_type(user) for user in await service.list_users(actor)]


async def resolve_audit_logs(info: Info, limit: int) -> List[AuditLog]:
    gateway = AuditLogGateway(UserResolver.get_store_from_info(info))
    return [to_audit_log_type(entry) for entry in await gateway.recent(limit)]


async def resolve_invite_user(info: Info, input: InviteUserInput) -> User:
    actor = await UserResolver.get_current_user(info)
    service = await UserResolver.get_service(info)
    user = await service.invite_user(
        actor,
        email=input.email,
        full_name=input.full_name,
        location=input.location,
        is_admin=input.is_admin,
    )
    return UserResolver.to_graphql_type(user)


async def resolve_update_user_admin(info: Info, user_id: str, is_admin: bool) -> User:
    actor = await UserResolver.get_current_user(info)
    service = await UserResolver.get_service(info)
    user = await service.update_user_admin(actor, str(user_id), is_admin)
    return UserResolver.to_graphql_type(user)


async def resolve_update_user_location(info: Info, user_id: str, location: str) -> User:
    actor = await UserResolver.get_current_user(info)
    service = await UserResolver.get_service(info)
    user = await service.update_user_location(actor, str(user_id), location)
    return UserResolver.to_graphql_type(user)


async def resolve_delete_user(info: Info, user_id: str) -> bool:
    actor = await UserResolver.get_current_user(info)
    service = await UserResolver.get_service(info)
    await service.delete_user(actor, str(user_id))
    return True


async def resolve_promote_to_admin(info: Info, email: str) -> User:
    user = await UserResolver.get_user_gateway(info).promote_to_admin(email)
    return UserResolver.to_graphql_type(user)
