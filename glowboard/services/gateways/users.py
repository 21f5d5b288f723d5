import asyncio
import logging
from typing import Optional

from glowboard.core.config import get_settings
from glowboard.core.constants import USERS_COLLECTION
from glowboard.core.exceptions import AuthenticationError, GatewayError
from glowboard.core.identity import Identity, IdentityProvider, classify_auth_error
from glowboard.db.document_store import DocumentStore
from glowboard.schemas.user import User, UserCreate
from glowboard.services.gateways.base import BaseGateway

logger = logging.getLogger(__name__)
settings = get_settings()


class UserGateway(BaseGateway[User]):
    """Users collection plus the session operations of the identity provider.

    A User document is created the first time an identity is observed; the
    first one ever created is made an admin.
    """

    collection_name = USERS_COLLECTION
    schema_class = User

    def __init__(
        self,
        store: DocumentStore,
        identity_provider: IdentityProvider,
        bootstrap_lock: Optional[asyncio.Lock] = None
    ):
        super().__init__(store)
        self.identity_provider = identity_provider
        # Share one lock between gateways over the same store to serialize first sign-ins
        self._bootstrap_lock = bootstrap_lock or asyncio.Lock()

    async def me(self) -> User:
        identity = await self.identity_provider.current_identity()
        if identity is None:
            raise AuthenticationError("Not authenticated")
        return await self._get_or_create(identity)

    async def login(self) -> User:
        try:
            identity = await self.identity_provider.sign_in()
        except AuthenticationError as e:
            # Already classified by the provider
            logger.error(f"Login error: {e} (code={e.code})")
            raise
        except Exception as e:
            logger.error(f"Login error: {e}", exc_info=True)
            raise classify_auth_error(getattr(e, "code", None), str(e)) from None
        return await self._get_or_create(identity)

    async def logout(self) -> None:
        try:
            await self.identity_provider.sign_out()
        except Exception as e:
            logger.error(f"Logout error: {e}", exc_info=True)
            raise AuthenticationError("Failed to logout") from None

    async def get_by_email(self, email: str) -> Optional[User]:
        documents = await self._run(
            "fetch",
            self.store.query(self.collection_name, filters=[("email", "==", email)]),
            "Failed to fetch user by email",
        )
        return self.to_schema(documents[0]) if documents else None

    async def is_first_user(self) -> bool:
        """True when no user exists yet. Errors count as "not first"."""
        try:
            documents = await self.store.list(self.collection_name)
        except Exception as e:
            logger.error(f"Error checking first user: {e}", exc_info=True)
            return False
        return len(documents) == 0

    async def promote_to_admin(self, email: str) -> User:
        try:
            user = await self.get_by_email(email)
            if user is None:
                raise GatewayError(f"User with email {email} not found")
            if user.is_admin:
                return user
            return await self.update(user.id, {"is_admin": True})
        except GatewayError as e:
            logger.error(f"Error promoting user to admin: {e}")
            raise GatewayError("Failed to promote user to admin") from None

    async def _get_or_create(self, identity: Identity) -> User:
        existing = await self.get_by_email(identity.email)
        if existing:
            return existing

        async with self._bootstrap_lock:
            # Another sign-in may have created it while we waited
            existing = await self.get_by_email(identity.email)
            if existing:
                return existing

            is_admin = await self.is_first_user()
            user = await self.create(UserCreate(
                email=identity.email,
                full_name=identity.display_name or "",
                location=settings.DEFAULT_USER_LOCATION,
                is_admin=is_admin,
            ))
            logger.info(f"Created user {user.email} (admin={user.is_admin})")
            return user
