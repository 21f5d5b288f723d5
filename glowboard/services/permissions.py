from typing import Optional

from glowboard.core.exceptions import PermissionDeniedError
from glowboard.schemas.user import User


def require_admin(user: User) -> None:
    if not user.is_admin:
        raise PermissionDeniedError("Admin privileges required")


def check_location_access(user: User, location: Optional[str]) -> None:
    """Non-admins may only touch data of their own location."""
    if user.is_admin:
        return
    if location != user.location:
        raise PermissionDeniedError("You can only manage data for your own location")
