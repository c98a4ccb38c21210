# SPDX-License-Identifier: MIT

import pendulum
import pytest

from strikechart.model.habitica import HabiticaTask, is_completed
from strikechart.service.habit_data import (
    completion_level,
    create_realistic_habit_data,
    create_sample_habit_data,
    current_streak,
)

NOW = pendulum.datetime(2024, 3, 15, 9, 30, tz="UTC")


def make_task(completed: bool | None = None, streak: int | None = None) -> HabiticaTask:
    return {
        "id": "task-1",
        "text": "Meditate",
        "type": "daily",
        "completed": completed,
        "streak": streak,
        "is_due": True,
    }


def completed_indices(task: HabiticaTask) -> set[int]:
    data = create_realistic_habit_data(task, NOW)
    return {i for i, day in enumerate(data["completion_data"]) if day["completed"]}


@pytest.mark.parametrize("completed", [True, False])
@pytest.mark.parametrize("streak", range(0, 46))
def test_series_shape(streak: int, completed: bool) -> None:
    data = create_realistic_habit_data(make_task(completed, streak), NOW)
    days = data["completion_data"]

    assert len(days) == 45
    assert days[-1]["date"] == NOW
    assert days[0]["date"] == NOW.subtract(days=44)
    for previous, current in zip(days, days[1:]):
        assert current["date"] == previous["date"].add(days=1)

    assert days[44]["completed"] is completed
    assert days[44]["count"] == (1 if completed else 0)


def test_series_metadata() -> None:
    data = create_realistic_habit_data(make_task(True, 2), NOW)
    assert data["habit_id"] == "task-1"
    assert data["habit_name"] == ""
    assert data["last_updated"] == NOW


def test_no_streak_marks_nothing_before_today() -> None:
    assert completed_indices(make_task(False, 0)) == set()
    assert completed_indices(make_task(True, 0)) == {44}


def test_missing_fields_default_to_no_streak_and_not_completed() -> None:
    assert completed_indices(make_task(None, None)) == set()


def test_is_completed_treats_missing_flag_as_pending() -> None:
    assert is_completed(make_task(None)) is False
    assert is_completed(make_task(False)) is False
    assert is_completed(make_task(True)) is True


def test_streak_of_three_applies_window_literally() -> None:
    # 45 - 3 + 1 = 43, and 43 is the yesterday slot, so only yesterday is set
    data = create_realistic_habit_data(make_task(False, 3), NOW)
    days = data["completion_data"]

    assert completed_indices(make_task(False, 3)) == {43}
    assert days[44]["completed"] is False
    assert days[44]["count"] == 0
    assert days[43]["count"] == 1


@pytest.mark.parametrize(
    "streak, expected",
    [
        (1, {43}),
        (2, {43}),
        (4, {42, 43}),
        (5, {41, 42, 43}),
        (45, set(range(1, 44))),
    ],
)
def test_streak_window(streak: int, expected: set[int]) -> None:
    assert completed_indices(make_task(False, streak)) == expected


def test_today_completed_is_added_to_streak_window() -> None:
    assert completed_indices(make_task(True, 5)) == {41, 42, 43, 44}


def test_sample_data_is_deterministic() -> None:
    first = create_sample_habit_data(NOW)
    second = create_sample_habit_data(NOW)

    assert first == second
    assert first["habit_id"] == "sample"
    assert len(first["completion_data"]) == 45
    assert [d["count"] for d in first["completion_data"][:10]] == [2, 1, 0, 3, 2, 1, 0, 2, 0, 1]
    assert first["completion_data"][12]["completed"] is False


def test_current_streak_counts_back_from_newest() -> None:
    data = create_realistic_habit_data(make_task(True, 5), NOW)
    assert current_streak(data["completion_data"]) == 4

    data = create_realistic_habit_data(make_task(False, 5), NOW)
    assert current_streak(data["completion_data"]) == 0


def test_current_streak_ignores_input_order() -> None:
    days = create_realistic_habit_data(make_task(True, 5), NOW)["completion_data"]
    assert current_streak(list(reversed(days))) == 4


def test_completion_level() -> None:
    assert completion_level({"date": NOW, "completed": False, "count": 3}) == 0
    assert completion_level({"date": NOW, "completed": True, "count": 0}) == 0
    assert completion_level({"date": NOW, "completed": True, "count": 1}) == 1
    assert completion_level({"date": NOW, "completed": True, "count": 9}) == 4
