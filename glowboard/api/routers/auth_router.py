import logging

from fastapi import APIRouter, Depends, HTTPException, status

from glowboard.core.auth import build_audit_logger, get_current_user, get_store, get_user_gateway
from glowboard.core.exceptions import AuthenticationError, GatewayError
from glowboard.db.document_store import DocumentStore
from glowboard.schemas.user import User
from glowboard.services.gateways.users import UserGateway

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/auth/login", response_model=User)
async def login(
    users: UserGateway = Depends(get_user_gateway),
    store: DocumentStore = Depends(get_store)
):
    """
    Sign in with the identity token sent as a bearer credential.
    The User document is created on the first login.
    """
    try:
        user = await users.login()
    except AuthenticationError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )
    except GatewayError as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))

    build_audit_logger(store, user.email).log_login()
    return user


@router.post("/auth/logout")
async def logout(
    user: User = Depends(get_current_user),
    users: UserGateway = Depends(get_user_gateway),
    store: DocumentStore = Depends(get_store)
):
    """
    End the session of the signed-in user.
    """
    try:
        await users.logout()
    except AuthenticationError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))

    build_audit_logger(store, user.email).log_logout()
    return {"message": "Logged out"}


@router.get("/auth/me", response_model=User)
async def read_me(user: User = Depends(get_current_user)):
    return user
