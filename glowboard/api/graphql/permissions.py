import logging
from typing import Any

import strawberry

from glowboard.api.graphql.resolvers.base import BaseResolver
from glowboard.core.exceptions import AuthenticationError

logger = logging.getLogger(__name__)


class IsAuthenticated(strawberry.BasePermission):
    message = "Not authenticated"

    async def has_permission(
        self,
        source: Any,
        info: strawberry.types.Info,
        **kwargs
    ) -> bool:
        try:
            await BaseResolver.get_current_user(info)
        except AuthenticationError:
            return False
        return True


class IsAdmin(strawberry.BasePermission):
    message = "Admin privileges required"

    async def has_permission(
        self,
        source: Any,
        info: strawberry.types.Info,
        **kwargs
    ) -> bool:
        try:
            user = await BaseResolver.get_current_user(info)
        except AuthenticationError:
            return False
        if not user.is_admin:
            logger.warning(f"Non-admin {user.email} denied access to {info.field_name}")
        return user.is_admin
