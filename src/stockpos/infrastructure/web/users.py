"""User directory routes."""

from __future__ import annotations

from flask import Blueprint, request

from stockpos.application.manage_users import (
    AddUserHandler,
    DeleteUserHandler,
    ListUsersHandler,
    UpdateUserHandler,
)
from stockpos.domain.model.user import Role, UserStatus
from stockpos.infrastructure.web.context import current_services, json_payload
from stockpos.infrastructure.web.serializers import user_json

users_bp = Blueprint("users", __name__, url_prefix="/users")


@users_bp.get("")
def list_users_route():
    users = ListUsersHandler(current_services().users).handle(request.args.get("search"))
    return {"users": [user_json(u) for u in users]}, 200


@users_bp.post("")
def create_user_route():
    payload = json_payload()
    user = AddUserHandler(current_services().users).handle(
        name=payload.get("name"),
        email=payload.get("email"),
        role=payload.get("role") or Role.STAFF.value,
        status=payload.get("status") or UserStatus.ACTIVE.value,
    )
    return user_json(user), 201


@users_bp.patch("/<user_id>")
def update_user_route(user_id: str):
    payload = json_payload()
    user = UpdateUserHandler(current_services().users).handle(
        user_id,
        name=payload.get("name"),
        email=payload.get("email"),
        role=payload.get("role"),
        status=payload.get("status"),
    )
    return user_json(user), 200


@users_bp.delete("/<user_id>")
def delete_user_route(user_id: str):
    DeleteUserHandler(current_services().users).handle(user_id)
    return {"deleted": user_id}, 200
