"""Domain layer errors.

Every domain error carries an ``ErrorKind``. The boundary envelopes only
expose the human-readable message, the kind is used to pick a status code.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Closed set of failure categories."""

    NOT_FOUND = "not_found"
    MALFORMED_TREE = "malformed_tree"
    VALIDATION = "validation"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"


class DomainError(Exception):
    """Base domain error."""

    kind: ErrorKind = ErrorKind.VALIDATION


class ValidationError(DomainError):
    """Domain validation error."""

    kind = ErrorKind.VALIDATION


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ContentDeletedError(DomainError):
    """Raised when acting on soft-deleted content."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, resource: str, resource_id: str):
        super().__init__(f"{resource} {resource_id} has been deleted")


class UnauthenticatedError(DomainError):
    """Raised when a mutation is attempted without a viewer identity."""

    kind = ErrorKind.UNAUTHORIZED

    def __init__(self, action: str):
        super().__init__(f"Authentication required to {action}")


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to change content they don't own."""

    kind = ErrorKind.FORBIDDEN

    def __init__(self, resource: str, resource_id: str, user_id: str):
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class MalformedTreeError(DomainError):
    """Raised when a comment snapshot cannot be assembled into a forest."""

    kind = ErrorKind.MALFORMED_TREE
