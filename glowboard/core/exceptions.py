from typing import TYPE_CHECKING, Any, Dict, List, Optional

if TYPE_CHECKING:
    from glowboard.services.validation import ValidationIssue


class GlowBoardError(Exception):
    """Base class for all application errors."""


class GatewayError(GlowBoardError):
    """Raised when a document store call fails.

    The message names the operation and the collection only; the provider's
    own exception is chained but never exposed to callers.
    """


class RecordNotFoundError(GatewayError):
    """Raised when a document does not exist in its collection."""


class AuthenticationError(GlowBoardError):
    """Raised when the identity provider cannot establish who the caller is."""

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.code = code


class PermissionDeniedError(GlowBoardError):
    """Raised when the caller's role or location does not allow an action."""


class InputValidationError(GlowBoardError):
    """Raised by services to block a write whose input failed validation."""

    def __init__(self, issues: List["ValidationIssue"]):
        self.issues = issues
        super().__init__("; ".join(issue.message for issue in issues) or "Invalid input")

    @property
    def extensions(self) -> Dict[str, Any]:
        # Picked up by GraphQL error formatting
        return {"issues": [issue.model_dump() for issue in self.issues]}

