# SPDX-License-Identifier: MIT

import logging
from typing import Any, Optional

from strikechart import time
from strikechart.model.habit_data import DayCompletion, HabitWidgetData
from strikechart.repository.reload_signal import ReloadSignal
from strikechart.repository.shared_store import SharedStore

logger = logging.getLogger(__name__)

HABIT_DATA_KEY = "habitData"


class HabitDataRepository:
    def __init__(self, store: SharedStore, reload_signal: ReloadSignal) -> None:
        self.store = store
        self.reload_signal = reload_signal

    def __convert_day_for_serialization(self, day: DayCompletion) -> dict[str, Any]:
        return {
            "date": time.datetime_to_iso_str(day["date"]),
            "completed": day["completed"],
            "count": day["count"],
        }

    def __convert_day_for_deserialization(self, raw_day: dict[str, Any]) -> DayCompletion:
        completed = raw_day["completed"]
        count = raw_day["count"]
        if not isinstance(completed, bool) or not isinstance(count, int):
            raise TypeError(f"malformed day: {raw_day}")
        return {
            "date": time.datetime_from_str(raw_day["date"]),
            "completed": completed,
            "count": count,
        }

    def __convert_habit_data_for_serialization(
        self, habit_data: HabitWidgetData
    ) -> dict[str, Any]:
        return {
            "habitId": habit_data["habit_id"],
            "habitName": habit_data["habit_name"],
            "completionData": [
                self.__convert_day_for_serialization(day)
                for day in habit_data["completion_data"]
            ],
            "lastUpdated": time.datetime_to_iso_str(habit_data["last_updated"]),
        }

    def __convert_habit_data_for_deserialization(
        self, raw_habit_data: dict[str, Any]
    ) -> HabitWidgetData:
        return {
            "habit_id": str(raw_habit_data["habitId"]),
            "habit_name": str(raw_habit_data["habitName"]),
            "completion_data": [
                self.__convert_day_for_deserialization(raw_day)
                for raw_day in raw_habit_data["completionData"]
            ],
            "last_updated": time.datetime_from_str(raw_habit_data["lastUpdated"]),
        }

    def save_habit_data(self, habit_data: HabitWidgetData) -> None:
        self.store.write(
            HABIT_DATA_KEY, self.__convert_habit_data_for_serialization(habit_data)
        )
        logger.debug(
            "saved %d days of data for habit %s",
            len(habit_data["completion_data"]),
            habit_data["habit_id"],
        )

        self.reload_signal.post()

    def get_habit_data(self) -> Optional[HabitWidgetData]:
        raw_habit_data = self.store.read(HABIT_DATA_KEY)
        if raw_habit_data is None:
            return None
        try:
            return self.__convert_habit_data_for_deserialization(raw_habit_data)
        except (KeyError, TypeError, ValueError) as e:
            logger.debug("discarding undecodable habit data: %s", e)
            return None
