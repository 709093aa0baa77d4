"""Abstract repository for User aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from stockpos.domain.model.user import User


class UserRepository(ABC):

    @abstractmethod
    def get_by_id(self, user_id: str) -> User | None:
        """Return a user by ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[User]:
        """Return every user in creation order."""

    @abstractmethod
    def save(self, user: User) -> None:
        """Persist a new or updated user."""

    @abstractmethod
    def delete(self, user_id: str) -> None:
        """Remove a user. Unknown IDs are ignored."""
