import logging
from typing import List, Optional

from glowboard.core.exceptions import InputValidationError, PermissionDeniedError
from glowboard.schemas.user import User, UserCreate
from glowboard.services.audit import AuditLogger
from glowboard.services.gateways.users import UserGateway
from glowboard.services.permissions import require_admin
from glowboard.services.validation import email as validate_email, location as validate_location

logger = logging.getLogger(__name__)


class UserManagementService:
    """Admin-only management of user accounts.

    An admin can neither revoke their own admin flag nor delete their own
    account.
    """

    def __init__(self, gateway: UserGateway, audit: AuditLogger):
        self.gateway = gateway
        self.audit = audit

    async def list_users(self, actor: User) -> List[User]:
        require_admin(actor)
        return await self.gateway.list()

    async def invite_user(
        self,
        actor: User,
        email: str,
        full_name: str = "",
        location: Optional[str] = None,
        is_admin: bool = False
    ) -> User:
        require_admin(actor)

        email_result = validate_email(email)
        errors = list(email_result.errors)
        if location is not None:
            errors.extend(validate_location(location).errors)
        if errors:
            raise InputValidationError(errors)

        user = await self.gateway.create(UserCreate(
            email=email_result.sanitized_value,
            full_name=full_name,
            location=location,
            is_admin=is_admin,
        ))
        self.audit.log_user("user_created", user.id, None, user)
        return user

    async def update_user_admin(self, actor: User, user_id: str, is_admin: bool) -> User:
        require_admin(actor)
        if user_id == actor.id and not is_admin:
            raise PermissionDeniedError("You cannot remove your own admin privileges")

        existing = await self.gateway.get(user_id)
        user = await self.gateway.update(user_id, {"is_admin": is_admin})
        self.audit.log_user("user_updated", user_id, existing, user)
        return user

    async def update_user_location(self, actor: User, user_id: str, location: str) -> User:
        require_admin(actor)
        result = validate_location(location)
        if not result.is_valid:
            raise InputValidationError(result.errors)

        existing = await self.gateway.get(user_id)
        user = await self.gateway.update(user_id, {"location": location})
        self.audit.log_user("user_updated", user_id, existing, user)
        return user

    async def delete_user(self, actor: User, user_id: str) -> None:
        require_admin(actor)
        if user_id == actor.id:
            raise PermissionDeniedError("You cannot delete your own account")

        existing = await self.gateway.get(user_id)
        await self.gateway.delete(user_id)
        logger.info(f"Deleted user {user_id}")
        self.audit.log_user("delete", user_id, existing, None)
