from abc import ABC, abstractmethod
from datetime import datetime, timedelta
from typing import Any, Dict, Optional

from jose import jwt, JWTError, ExpiredSignatureError
from pydantic import BaseModel

from glowboard.core.config import get_settings
from glowboard.core.exceptions import AuthenticationError

settings = get_settings()

# Provider error codes with a dedicated user-facing message
POPUP_BLOCKED = "auth/popup-blocked"
POPUP_CLOSED_BY_USER = "auth/popup-closed-by-user"
UNAUTHORIZED_DOMAIN = "auth/unauthorized-domain"

AUTH_ERROR_MESSAGES = {
    POPUP_BLOCKED: "Popup was blocked. Please allow popups for this site and try again.",
    POPUP_CLOSED_BY_USER: "Login was cancelled. Please try again.",
    UNAUTHORIZED_DOMAIN: "This domain is not authorized for Google sign-in. Please contact support.",
}


class Identity(BaseModel):
    email: str
    display_name: Optional[str] = None


def classify_auth_error(code: Optional[str], message: Optional[str] = None) -> AuthenticationError:
    """
    Map an identity provider error code to a user-facing AuthenticationError.
    """
    if code in AUTH_ERROR_MESSAGES:
        return AuthenticationError(AUTH_ERROR_MESSAGES[code], code=code)
    return AuthenticationError(f"Login failed: {message or 'Unknown error'}", code=code)


class IdentityProvider(ABC):
    """Abstract interface over the hosted identity provider."""

    @abstractmethod
    async def current_identity(self) -> Optional[Identity]:
        """Return the signed-in identity, or None when nobody is signed in."""
        pass

    @abstractmethod
    async def sign_in(self) -> Identity:
        """
        Run the interactive sign-in flow.

        Raises:
            AuthenticationError classified by provider error code
        """
        pass

    @abstractmethod
    async def sign_out(self) -> None:
        """End the current session."""
        pass


def create_identity_token(
    email: str,
    display_name: Optional[str] = None,
    expires_delta: Optional[timedelta] = None
) -> str:
    """
    Create a signed identity token carrying the email and display name.
    """
    to_encode: Dict[str, Any] = {"sub": email, "email": email}
    if display_name:
        to_encode["name"] = display_name

    if expires_delta:
        expire = datetime.utcnow() + expires_delta
    else:
        expire = datetime.utcnow() + timedelta(minutes=60)

    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def verify_identity_token(token: str) -> Identity:
    """
    Verify and decode an identity token.
    Raises AuthenticationError if the token is invalid, expired or carries no email.
    """
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except ExpiredSignatureError:
        raise classify_auth_error("auth/id-token-expired", "Session has expired")
    except JWTError as e:
        raise classify_auth_error("auth/invalid-id-token", str(e))

    email = payload.get("email") or payload.get("sub")
    if not email:
        raise classify_auth_error("auth/missing-email", "No email found in account")
    return Identity(email=email, display_name=payload.get("name"))


class TokenIdentityProvider(IdentityProvider):
    """Identity provider backed by a bearer token issued by the hosted provider."""

    def __init__(self, token: Optional[str]):
        self._token = token

    @classmethod
    def from_authorization_header(cls, header: Optional[str]) -> "TokenIdentityProvider":
        if not header or not header.lower().startswith("bearer "):
            return cls(None)
        token_parts = header.split(" ", 1)
        return cls(token_parts[1].strip() or None)

    async def current_identity(self) -> Optional[Identity]:
        if not self._token:
            return None
        try:
            return verify_identity_token(self._token)
        except AuthenticationError:
            return None

    async def sign_in(self) -> Identity:
        if not self._token:
            raise classify_auth_error("auth/missing-token", "No credentials supplied")
        return verify_identity_token(self._token)

    async def sign_out(self) -> None:
        self._token = None
