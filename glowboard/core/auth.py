from fastapi import Depends, HTTPException, Request, status

from glowboard.core.exceptions import AuthenticationError
from glowboard.core.identity import IdentityProvider, TokenIdentityProvider
from glowboard.db.document_store import DocumentStore
from glowboard.schemas.user import User
from glowboard.services.audit import AuditLogger
from glowboard.services.gateways.audit_logs import AuditLogGateway
from glowboard.services.gateways.users import UserGateway


def get_store(request: Request) -> DocumentStore:
    return request.app.state.document_store


def get_identity_provider(request: Request) -> IdentityProvider:
    """
    Build an identity provider from the bearer token of the request, if any.
    """
    return TokenIdentityProvider.from_authorization_header(request.headers.get("authorization"))


def get_user_gateway(
    request: Request,
    store: DocumentStore = Depends(get_store),
    identity_provider: IdentityProvider = Depends(get_identity_provider)
) -> UserGateway:
    # One lock per application so concurrent first sign-ins are serialized
    return UserGateway(store, identity_provider, bootstrap_lock=request.app.state.bootstrap_lock)


async def get_current_user(users: UserGateway = Depends(get_user_gateway)) -> User:
    """
    Resolve the signed-in user, creating the User document on first sight.
    """
    try:
        return await users.me()
    except AuthenticationError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )


def build_audit_logger(store: DocumentStore, user_email: str) -> AuditLogger:
    return AuditLogger(AuditLogGateway(store), user_email)
