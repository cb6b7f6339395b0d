from __future__ import annotations

from typing import Optional, Protocol

from .model import User


class UserRepository(Protocol):
    """Repository interface for User.

    Services depend on this interface, never on a concrete database.
    """

    def exists_by_email(self, email: str) -> bool:
        raise NotImplementedError

    def find_by_email(self, email: str) -> Optional[User]:
        raise NotImplementedError

    def find_by_id(self, user_id: int) -> Optional[User]:
        raise NotImplementedError

    def save(self, user: User) -> User:
        raise NotImplementedError
