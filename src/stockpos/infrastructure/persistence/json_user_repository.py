"""JSON-file-backed implementation of UserRepository."""

from __future__ import annotations

from pathlib import Path

from stockpos.domain.model.user import Role, User, UserStatus
from stockpos.domain.repository.user_repository import UserRepository
from stockpos.infrastructure.persistence.json_file import JsonRecordFile


class JsonUserRepository(UserRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonRecordFile(file_path)

    def get_by_id(self, user_id: str) -> User | None:
        for raw in self._file.load():
            if raw["id"] == user_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[User]:
        return [self._to_domain(raw) for raw in self._file.load()]

    def save(self, user: User) -> None:
        self._file.upsert(self._to_raw(user))

    def delete(self, user_id: str) -> None:
        self._file.remove(user_id)

    @staticmethod
    def _to_raw(user: User) -> dict:
        return {
            "id": user.id,
            "name": user.name,
            "email": user.email,
            "role": user.role.value,
            "status": user.status.value,
        }

    @staticmethod
    def _to_domain(raw: dict) -> User:
        return User(
            id=raw["id"],
            name=raw["name"],
            email=raw["email"],
            role=Role(raw["role"]),
            status=UserStatus(raw["status"]),
        )
