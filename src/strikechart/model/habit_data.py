# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum

SERIES_LENGTH = 45


class DayCompletion(TypedDict):
    date: pendulum.DateTime
    completed: bool
    count: int  # For habits that can be done multiple times per day


class HabitWidgetData(TypedDict):
    habit_id: str
    habit_name: str  # Empty for clean widget display
    completion_data: list[DayCompletion]  # Oldest first, today last
    last_updated: pendulum.DateTime
