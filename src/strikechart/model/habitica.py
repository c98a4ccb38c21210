# SPDX-License-Identifier: MIT

from typing import Any, Optional, TypedDict

DAILY_TASK_TYPE = "daily"
UNNAMED_HABIT = "Unnamed Habit"


class HabiticaTask(TypedDict):
    id: str  # "_id" on the wire
    text: str
    type: str  # "daily", "habit", "todo", "reward"
    completed: Optional[bool]
    streak: Optional[int]
    is_due: Optional[bool]


class HabiticaUser(TypedDict):
    id: str
    name: str


class LoginResponse(TypedDict):
    id: str
    api_token: str
    new_user: bool


def task_from_json(raw: dict[str, Any]) -> HabiticaTask:
    return {
        "id": raw["_id"],
        "text": raw.get("text") or "",
        "type": raw["type"],
        "completed": raw.get("completed"),
        "streak": raw.get("streak"),
        "is_due": raw.get("isDue"),
    }


def user_from_json(raw: dict[str, Any]) -> HabiticaUser:
    profile = raw.get("profile") or {}
    return {
        "id": raw["id"],
        "name": profile.get("name") or "",
    }


def login_response_from_json(raw: dict[str, Any]) -> LoginResponse:
    return {
        "id": raw["id"],
        "api_token": raw["apiToken"],
        "new_user": bool(raw.get("newUser", False)),
    }


def display_name(task: HabiticaTask) -> str:
    return task["text"] if task["text"] else UNNAMED_HABIT


def is_daily(task: HabiticaTask) -> bool:
    return task["type"] == DAILY_TASK_TYPE


def is_completed(task: HabiticaTask) -> bool:
    return task["completed"] or False
