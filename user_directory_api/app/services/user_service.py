"""
Business logic for users.

``UserService`` exposes user operations to the API layer and delegates
each of them to a :class:`UserRepository` passed in at construction
time.  Storage errors propagate to the caller unchanged, except for
deletion, which reports them as a :class:`DeleteOutcome`.
"""

from __future__ import annotations

import enum
import logging
import sqlite3
from dataclasses import dataclass
from typing import List, Optional

from user_directory_api.app.repositories.user_repository import SaveResult, UserRepository
from user_directory_api.app.schemas.user import UserRead, UserWrite


logger = logging.getLogger(__name__)


class DeleteOutcome(str, enum.Enum):
    DELETED = "deleted"
    NOT_FOUND = "not_found"
    STORAGE_UNAVAILABLE = "storage_unavailable"


@dataclass(frozen=True)
class DeleteResult:
    user_id: int
    outcome: DeleteOutcome

    @property
    def ok(self) -> bool:
        """``True`` unless the storage layer failed; deleting a missing user is not an error."""
        return self.outcome is not DeleteOutcome.STORAGE_UNAVAILABLE


class UserService:
    """Service for reading, saving and deleting users."""

    def __init__(self, repository: UserRepository) -> None:
        self.repository = repository

    def get_users(self) -> List[UserRead]:
        return self.repository.find_all()

    def get_user_by_id(self, user_id: int) -> Optional[UserRead]:
        return self.repository.find_by_id(user_id)

    def get_users_by_priority(self, priority: int) -> List[UserRead]:
        return self.repository.find_by_priority(priority)

    def post_user(self, user: UserWrite) -> SaveResult:
        """Create a user, or overwrite the one whose id is given."""
        result = self.repository.save(user)
        if result.created:
            logger.info("Created user %s", result.user.id)
        else:
            logger.info("Updated user %s", result.user.id)
        return result

    def delete_user(self, user_id: int) -> DeleteResult:
        """Delete a user by id.

        Returns ``DELETED`` when a row was removed, ``NOT_FOUND`` when
        there was nothing to remove and ``STORAGE_UNAVAILABLE`` when the
        database raised an error.  The error itself is logged rather than
        re-raised.
        """
        try:
            affected = self.repository.delete_by_id(user_id)
        except sqlite3.Error:
            logger.exception("Failed to delete user %s", user_id)
            return DeleteResult(user_id, DeleteOutcome.STORAGE_UNAVAILABLE)
        if affected:
            logger.info("Deleted user %s", user_id)
            return DeleteResult(user_id, DeleteOutcome.DELETED)
        logger.info("User %s not found, nothing to delete", user_id)
        return DeleteResult(user_id, DeleteOutcome.NOT_FOUND)

    def count_users(self) -> int:
        return self.repository.count()
