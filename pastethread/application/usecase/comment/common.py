"""Request checks shared by comment use cases."""

from pastethread.domain.error import UnauthenticatedError, ValidationError
from pastethread.domain.value import UserId


def require_viewer(user_id: str | None, action: str) -> UserId:
    """Return the viewer's user ID or refuse an anonymous mutation.

    Args:
        user_id: Viewer user ID resolved from the auth token, if any
        action: What the viewer tried to do, for the error message

    Raises:
        UnauthenticatedError: If there is no viewer
    """
    if not user_id:
        raise UnauthenticatedError(action)
    return UserId(user_id)


def require_id(value: str | None, label: str) -> str:
    """Reject missing or blank identifiers.

    Raises:
        ValidationError: If the identifier is empty
    """
    if not value or not value.strip():
        raise ValidationError(f"{label} is required")
    return value
