"""Mapping of failure envelopes to HTTP status codes."""

from fastapi import status

from pastethread.application.usecase.comment import CommentFailure
from pastethread.domain.error import ErrorKind

STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorKind.MALFORMED_TREE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for(result: object, success_status: int = status.HTTP_200_OK) -> int:
    """Pick the status code for a result envelope.

    Args:
        result: Envelope returned by a use case
        success_status: Status to use when the envelope is a success

    Returns:
        HTTP status code
    """
    if isinstance(result, CommentFailure):
        return STATUS_BY_KIND[result.kind]
    return success_status
