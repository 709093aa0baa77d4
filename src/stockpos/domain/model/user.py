"""User aggregate: staff records with a role and an active flag.

Users are a plain directory; nothing here is tied to login.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from stockpos.domain.exceptions import ValidationError


class Role(Enum):
    ADMIN = "Admin"
    MANAGER = "Manager"
    STAFF = "Staff"


class UserStatus(Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"


def _parse_choice(enum_cls, value, label: str):
    if isinstance(value, enum_cls):
        return value
    text = str(value).strip().lower()
    for member in enum_cls:
        if member.value.lower() == text:
            return member
    allowed = ", ".join(m.value for m in enum_cls)
    raise ValidationError(f"Unknown {label} {value!r} (expected one of: {allowed})")


def parse_role(value: Role | str) -> Role:
    return _parse_choice(Role, value, "role")


def parse_status(value: UserStatus | str) -> UserStatus:
    return _parse_choice(UserStatus, value, "status")


def _require_str(value: object, label: str) -> None:
    if value is not None and not isinstance(value, str):
        raise ValidationError(f"{label} must be text, got {value!r}")


def _clean_name(name: str | None) -> str:
    _require_str(name, "User name")
    if name is None or not name.strip():
        raise ValidationError("User name is required")
    return name.strip()


def _clean_email(email: str | None) -> str:
    # Uniqueness is not enforced; two users may share an address.
    _require_str(email, "Email")
    if email is None or not email.strip():
        raise ValidationError("Email is required")
    email = email.strip()
    local, _, domain = email.partition("@")
    if not local or not domain:
        raise ValidationError(f"Invalid email address: {email!r}")
    return email


@dataclass
class User:
    id: str
    name: str
    email: str
    role: Role = Role.STAFF
    status: UserStatus = UserStatus.ACTIVE

    @staticmethod
    def create(
        id: str,
        name: str | None,
        email: str | None,
        role: Role | str = Role.STAFF,
        status: UserStatus | str = UserStatus.ACTIVE,
    ) -> User:
        return User(
            id=id,
            name=_clean_name(name),
            email=_clean_email(email),
            role=parse_role(role),
            status=parse_status(status),
        )

    @property
    def is_active(self) -> bool:
        return self.status is UserStatus.ACTIVE

    def update(
        self,
        name: str | None = None,
        email: str | None = None,
        role: Role | str | None = None,
        status: UserStatus | str | None = None,
    ) -> None:
        """Replace the given fields; all are validated before any is set."""
        new_name = _clean_name(name) if name is not None else self.name
        new_email = _clean_email(email) if email is not None else self.email
        new_role = parse_role(role) if role is not None else self.role
        new_status = parse_status(status) if status is not None else self.status

        self.name = new_name
        self.email = new_email
        self.role = new_role
        self.status = new_status
