# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict

import pendulum

from strikechart.model.habit_data import HabitWidgetData

TimelineReloadPolicy = Literal["at_end"]


class TimelineEntry(TypedDict):
    date: pendulum.DateTime  # "as of" moment for this snapshot
    habit_data: Optional[HabitWidgetData]  # None renders the sample series


class Timeline(TypedDict):
    entries: list[TimelineEntry]
    policy: TimelineReloadPolicy
