"""User record schemas across three versions, with their transforms."""

from typing import Any

from typing_extensions import TypedDict


class UserV1(TypedDict):
    id: int
    name: str


class UserV2(TypedDict):
    id: int
    name: str
    email: str | None


class UserV3(TypedDict):
    id: int
    firstName: str
    lastName: str
    email: str


def upgrade_v1_to_v2(user: dict[str, Any]) -> dict[str, Any]:
    return {**user, "email": None}


def downgrade_v2_to_v1(user: dict[str, Any]) -> dict[str, Any]:
    return {"id": user["id"], "name": user["name"]}


def upgrade_v2_to_v3(user: dict[str, Any]) -> dict[str, Any]:
    """Split name on the first space; default the last name and email."""
    first_name, _, last_name = user["name"].partition(" ")
    return {
        "id": user["id"],
        "firstName": first_name,
        "lastName": last_name or "User",
        "email": user["email"] or "default@example.com",
    }


def downgrade_v3_to_v2(user: dict[str, Any]) -> dict[str, Any]:
    return {
        "id": user["id"],
        "name": f"{user['firstName']} {user['lastName']}",
        "email": user["email"],
    }
