# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from strikechart.model.habit_data import HabitWidgetData
from strikechart.model.timeline import Timeline, TimelineEntry
from strikechart.service.habit_data import create_sample_habit_data
from strikechart.time import now_local

TIMELINE_ENTRY_COUNT = 24
TIMELINE_ENTRY_SPACING_HOURS = 1


def build_timeline(
    habit_data: Optional[HabitWidgetData],
    now: Optional[pendulum.DateTime] = None,
) -> Timeline:
    """
    Build the widget timeline: 24 hourly snapshots starting at now.

    Every entry shares the same series; only the "as of" moment differs.
    The host asks for a fresh timeline once the last entry is reached.
    """
    if now is None:
        now = now_local()

    entries: list[TimelineEntry] = [
        {
            "date": now.add(hours=hour_offset * TIMELINE_ENTRY_SPACING_HOURS),
            "habit_data": habit_data,
        }
        for hour_offset in range(TIMELINE_ENTRY_COUNT)
    ]
    return {"entries": entries, "policy": "at_end"}


def placeholder_entry(now: Optional[pendulum.DateTime] = None) -> TimelineEntry:
    if now is None:
        now = now_local()
    return {"date": now, "habit_data": create_sample_habit_data(now)}


def snapshot_entry(
    habit_data: Optional[HabitWidgetData],
    now: Optional[pendulum.DateTime] = None,
) -> TimelineEntry:
    if now is None:
        now = now_local()
    return {"date": now, "habit_data": habit_data}


def entry_for(timeline: Timeline, moment: pendulum.DateTime) -> Optional[TimelineEntry]:
    """Return the newest entry whose date is not after moment."""
    current: Optional[TimelineEntry] = None
    for entry in timeline["entries"]:
        if entry["date"] > moment:
            break
        current = entry
    return current


def expires_at(timeline: Timeline) -> Optional[pendulum.DateTime]:
    """Moment after which the host must request a new timeline."""
    if not timeline["entries"]:
        return None
    return timeline["entries"][-1]["date"].add(hours=TIMELINE_ENTRY_SPACING_HOURS)


def resolve_habit_data(entry: TimelineEntry) -> HabitWidgetData:
    """Series to render for an entry, falling back to the sample series."""
    if entry["habit_data"] is not None:
        return entry["habit_data"]
    return create_sample_habit_data(entry["date"])
