# SPDX-License-Identifier: MIT

import logging
import time
from typing import Callable, Optional

import pendulum

from strikechart.model.timeline import Timeline, TimelineEntry
from strikechart.repository.habit_data import HabitDataRepository
from strikechart.repository.reload_signal import ReloadSignal
from strikechart.service.timeline import build_timeline, entry_for, expires_at
from strikechart.time import now_local

logger = logging.getLogger(__name__)

DEFAULT_POLL_SECONDS = 60.0


class WidgetHost:
    """
    Foreground stand-in for the home-screen widget host.

    Keeps one timeline at a time and asks for a new one when the last
    entry has run out, or when the app posted a reload since it was built.
    """

    def __init__(
        self,
        habit_data_repo: HabitDataRepository,
        reload_signal: ReloadSignal,
        clock: Callable[[], pendulum.DateTime] = now_local,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.habit_data_repo = habit_data_repo
        self.reload_signal = reload_signal
        self.clock = clock
        self.sleep = sleep
        self.timeline: Optional[Timeline] = None
        self.built_at: Optional[pendulum.DateTime] = None

    def reload(self, now: Optional[pendulum.DateTime] = None) -> Timeline:
        if now is None:
            now = self.clock()
        habit_data = self.habit_data_repo.get_habit_data()
        if habit_data is None:
            logger.info("no cached habit data, widget shows the sample series")
        self.timeline = build_timeline(habit_data, now)
        self.built_at = now
        logger.debug("built widget timeline at %s", now)
        return self.timeline

    def needs_reload(self, now: pendulum.DateTime) -> bool:
        if self.timeline is None or self.built_at is None:
            return True

        expiry = expires_at(self.timeline)
        if expiry is None or now >= expiry:
            return True

        posted = self.reload_signal.last_posted()
        return posted is not None and posted > self.built_at

    def current_entry(self) -> TimelineEntry:
        now = self.clock()
        if self.needs_reload(now):
            self.reload(now)
        assert self.timeline is not None

        entry = entry_for(self.timeline, now)
        if entry is None:
            # Clock went backwards; start over from now.
            entry = self.reload(now)["entries"][0]
        return entry

    def run(
        self,
        render: Callable[[TimelineEntry], None],
        poll_seconds: float = DEFAULT_POLL_SECONDS,
        iterations: Optional[int] = None,
    ) -> None:
        """Render whenever the current entry changes, polling every poll_seconds."""
        rendered: Optional[tuple[Optional[pendulum.DateTime], pendulum.DateTime]] = None
        iteration = 0
        while iterations is None or iteration < iterations:
            entry = self.current_entry()
            key = (self.built_at, entry["date"])
            if key != rendered:
                render(entry)
                rendered = key
            iteration += 1
            if iterations is None or iteration < iterations:
                self.sleep(poll_seconds)
