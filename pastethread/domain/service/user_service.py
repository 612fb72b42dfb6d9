"""User domain service."""

from collections.abc import Iterable

import logfire

from pastethread.domain.error import NotFoundError
from pastethread.domain.model import User
from pastethread.domain.repository import UserRepository
from pastethread.domain.value import AuthorSnapshot, UserId

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            logfire.info("User found", user_id=str(user_id))
            return user

    async def get_author_snapshots(
        self, user_ids: Iterable[UserId | None]
    ) -> dict[UserId, AuthorSnapshot]:
        """Resolve author snapshots for a batch of user IDs.

        Accounts that no longer exist are absent from the result.

        Args:
            user_ids: User IDs, None entries are ignored

        Returns:
            Mapping of user ID to author snapshot
        """
        unique_ids = list({uid for uid in user_ids if uid is not None})
        if not unique_ids:
            return {}

        with logfire.span(
            "user_service.get_author_snapshots", requested=len(unique_ids)
        ):
            users = await self.user_repository.find_by_ids(unique_ids)
            logfire.info(
                "Authors resolved", requested=len(unique_ids), found=len(users)
            )
            return {user.id: user.to_author() for user in users}
