from typing import Any, Dict

from strawberry.types import Info

from glowboard.core.auth import build_audit_logger
from glowboard.db.document_store import DocumentStore
from glowboard.schemas.user import User
from glowboard.services.audit import AuditLogger
from glowboard.services.gateways.users import UserGateway


class BaseResolver:
    """Shared access to the per-request context of GraphQL resolvers.

    The signed-in user and the audit logger are resolved once per request
    and kept in the context.
    """

    @classmethod
    def get_context(cls, info: Info) -> Dict[str, Any]:
        return info.context

    @classmethod
    def get_store_from_info(cls, info: Info) -> DocumentStore:
        """Extract the document store from GraphQL info context."""
        return info.context["store"]

    @classmethod
    def get_user_gateway(cls, info: Info) -> UserGateway:
        return info.context["users"]

    @classmethod
    async def get_current_user(cls, info: Info) -> User:
        context = info.context
        if context.get("current_user") is None:
            context["current_user"] = await cls.get_user_gateway(info).me()
        return context["current_user"]

    @classmethod
    async def get_audit_logger(cls, info: Info) -> AuditLogger:
        context = info.context
        if context.get("audit") is None:
            user = await cls.get_current_user(info)
            context["audit"] = build_audit_logger(cls.get_store_from_info(info), user.email)
        return context["audit"]
