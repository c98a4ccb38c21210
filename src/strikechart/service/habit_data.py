# SPDX-License-Identifier: MIT

import logging
from typing import Optional

import pendulum

from strikechart.model.habit_data import SERIES_LENGTH, DayCompletion, HabitWidgetData
from strikechart.model.habitica import HabiticaTask, display_name, is_completed
from strikechart.time import now_local

logger = logging.getLogger(__name__)

TODAY_INDEX = SERIES_LENGTH - 1
YESTERDAY_INDEX = SERIES_LENGTH - 2

SAMPLE_HABIT_ID = "sample"
SAMPLE_COMPLETED_PATTERN = [True, True, False, True, True, True, False, True, False, True]
SAMPLE_COUNT_PATTERN = [2, 1, 0, 3, 2, 1, 0, 2, 0, 1]


def create_realistic_habit_data(
    task: HabiticaTask,
    now: Optional[pendulum.DateTime] = None,
) -> HabitWidgetData:
    """
    Build a 45-day completion series from a single task snapshot.

    Habitica does not expose per-day history for dailies, so everything
    before today is reconstructed from the streak:

    - today (index 44) mirrors the live completed flag
    - yesterday (index 43) is completed whenever the streak is at least 1
    - any other index >= 45 - streak + 1 is completed

    This is a best-effort guess, not historical fact. The window arithmetic
    is kept exactly as-is so cached series stay comparable between versions.
    """
    if now is None:
        now = now_local()

    streak = task["streak"] or 0
    completed_today = is_completed(task)

    completion_data: list[DayCompletion] = []
    for day_index in range(SERIES_LENGTH):
        date = now.add(days=day_index - TODAY_INDEX)
        is_today = day_index == TODAY_INDEX
        is_yesterday = day_index == YESTERDAY_INDEX

        completed = False
        count = 0

        if streak > 0:
            if is_yesterday and streak >= 1:
                completed = True
                count = 1
            elif (
                not is_today
                and not is_yesterday
                and day_index >= (SERIES_LENGTH - streak + 1)
            ):
                completed = True
                count = 1

        if is_today:
            completed = completed_today
            count = 1 if completed else 0

        completion_data.append({"date": date, "completed": completed, "count": count})

    logger.info(
        "generated %d-day completion data for %s - streak: %d, today completed: %s",
        SERIES_LENGTH,
        display_name(task),
        streak,
        completed_today,
    )
    logger.debug(
        "completion pattern: %s",
        "".join("X" if day["completed"] else "." for day in completion_data),
    )

    return {
        "habit_id": task["id"],
        "habit_name": "",
        "completion_data": completion_data,
        "last_updated": now,
    }


def create_sample_habit_data(
    now: Optional[pendulum.DateTime] = None,
) -> HabitWidgetData:
    """Fixed series shown by the widget before any habit data is cached."""
    if now is None:
        now = now_local()

    completion_data: list[DayCompletion] = [
        {
            "date": now.add(days=day_index - TODAY_INDEX),
            "completed": SAMPLE_COMPLETED_PATTERN[day_index % 10],
            "count": SAMPLE_COUNT_PATTERN[day_index % 10],
        }
        for day_index in range(SERIES_LENGTH)
    ]

    return {
        "habit_id": SAMPLE_HABIT_ID,
        "habit_name": "",
        "completion_data": completion_data,
        "last_updated": now,
    }


def current_streak(completion_data: list[DayCompletion]) -> int:
    """Count consecutive completed days going back from the newest one."""
    streak = 0
    for day in sorted(completion_data, key=lambda d: d["date"], reverse=True):
        if not day["completed"]:
            break
        streak += 1
    return streak


def completion_level(day: DayCompletion) -> int:
    """Colour level 0-4 for a contribution cell."""
    if not day["completed"]:
        return 0
    return min(day["count"], 4)
