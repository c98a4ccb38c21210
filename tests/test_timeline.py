# SPDX-License-Identifier: MIT

import pendulum

from strikechart.bootstrap import Services
from strikechart.model.habit_data import HabitWidgetData
from strikechart.service.habit_data import create_realistic_habit_data
from strikechart.service.timeline import (
    build_timeline,
    entry_for,
    expires_at,
    placeholder_entry,
    resolve_habit_data,
)
from strikechart.service.widget_host import WidgetHost

NOW = pendulum.datetime(2024, 3, 15, 9, 30, tz="UTC")


def make_habit_data(streak: int = 3, completed: bool = True) -> HabitWidgetData:
    task = {"id": "d1", "text": "Stretch", "type": "daily", "completed": completed, "streak": streak, "is_due": True}
    return create_realistic_habit_data(task, NOW)  # type: ignore[arg-type]


class FakeClock:
    def __init__(self, now: pendulum.DateTime) -> None:
        self.now = now

    def __call__(self) -> pendulum.DateTime:
        return self.now


def test_timeline_has_24_hourly_entries_sharing_one_series() -> None:
    habit_data = make_habit_data()
    timeline = build_timeline(habit_data, NOW)
    entries = timeline["entries"]

    assert len(entries) == 24
    assert timeline["policy"] == "at_end"
    assert entries[0]["date"] == NOW
    for previous, current in zip(entries, entries[1:]):
        assert current["date"] > previous["date"]
        assert current["date"] == previous["date"].add(hours=1)
    for entry in entries:
        assert entry["habit_data"] == habit_data


def test_timeline_without_cache_renders_sample() -> None:
    timeline = build_timeline(None, NOW)
    assert all(entry["habit_data"] is None for entry in timeline["entries"])
    assert resolve_habit_data(timeline["entries"][0])["habit_id"] == "sample"


def test_placeholder_entry_uses_sample() -> None:
    entry = placeholder_entry(NOW)
    assert entry["habit_data"] is not None
    assert entry["habit_data"]["habit_id"] == "sample"


def test_entry_for_and_expiry() -> None:
    timeline = build_timeline(make_habit_data(), NOW)

    assert entry_for(timeline, NOW.subtract(minutes=1)) is None
    entry = entry_for(timeline, NOW.add(hours=2, minutes=59))
    assert entry is not None
    assert entry["date"] == NOW.add(hours=2)
    assert expires_at(timeline) == NOW.add(hours=24)


def test_host_rebuilds_after_last_entry(services: Services) -> None:
    clock = FakeClock(NOW)
    host = WidgetHost(services.habit_data_repo, services.reload_signal, clock=clock)

    host.current_entry()
    first_build = host.built_at
    assert first_build == NOW

    clock.now = NOW.add(hours=23, minutes=59)
    host.current_entry()
    assert host.built_at == first_build

    clock.now = NOW.add(hours=24)
    entry = host.current_entry()
    assert host.built_at == NOW.add(hours=24)
    assert entry["date"] == NOW.add(hours=24)


def test_host_picks_up_reload_signal(services: Services) -> None:
    clock = FakeClock(pendulum.now("UTC").subtract(minutes=5))
    host = WidgetHost(services.habit_data_repo, services.reload_signal, clock=clock)

    assert host.current_entry()["habit_data"] is None

    habit_data = make_habit_data()
    services.habit_data_repo.save_habit_data(habit_data)

    entry = host.current_entry()
    assert entry["habit_data"] == habit_data


def test_host_run_renders_only_on_change(services: Services) -> None:
    clock = FakeClock(NOW)
    sleeps: list[float] = []

    def sleep(seconds: float) -> None:
        sleeps.append(seconds)
        clock.now = clock.now.add(minutes=30)

    host = WidgetHost(services.habit_data_repo, services.reload_signal, clock=clock, sleep=sleep)
    rendered: list[pendulum.DateTime] = []

    host.run(lambda entry: rendered.append(entry["date"]), poll_seconds=1800, iterations=4)

    # 09:30, 10:00, 10:30, 11:00 -> hourly entries 09:30 and 10:30
    assert rendered == [NOW, NOW.add(hours=1)]
    assert sleeps == [1800, 1800, 1800]
