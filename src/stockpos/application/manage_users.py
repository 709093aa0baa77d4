"""Application services: User Directory use cases.

The directory is plain record keeping; roles and statuses here do not
grant or restrict anything.
"""

from __future__ import annotations

from typing import Callable

from stockpos.domain.exceptions import NotFoundError
from stockpos.domain.model.user import Role, User, UserStatus
from stockpos.domain.repository.user_repository import UserRepository
from stockpos.domain.service.inventory_ledger import new_id


class AddUserHandler:

    def __init__(
        self,
        user_repo: UserRepository,
        id_factory: Callable[[], str] = new_id,
    ) -> None:
        self._user_repo = user_repo
        self._new_id = id_factory

    def handle(
        self,
        name: str,
        email: str,
        role: str = Role.STAFF.value,
        status: str = UserStatus.ACTIVE.value,
    ) -> User:
        user = User.create(self._new_id(), name, email, role, status)
        self._user_repo.save(user)
        return user


class UpdateUserHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(
        self,
        user_id: str,
        name: str | None = None,
        email: str | None = None,
        role: str | None = None,
        status: str | None = None,
    ) -> User:
        user = _require_user(self._user_repo, user_id)
        user.update(name=name, email=email, role=role, status=status)
        self._user_repo.save(user)
        return user


class DeleteUserHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(self, user_id: str) -> None:
        _require_user(self._user_repo, user_id)
        self._user_repo.delete(user_id)


class ListUsersHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(self, search: str | None = None) -> list[User]:
        """Users whose name or email contains *search* (case-insensitive)."""
        needle = (search or "").strip().lower()
        return [
            u for u in self._user_repo.list_all()
            if needle in u.name.lower() or needle in u.email.lower()
        ]


def _require_user(user_repo: UserRepository, user_id: str) -> User:
    user = user_repo.get_by_id(user_id)
    if user is None:
        raise NotFoundError(f"User with ID '{user_id}' not found")
    return user
