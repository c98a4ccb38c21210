# SPDX-License-Identifier: MIT

import logging
from typing import Any, Optional

from strikechart import time
from strikechart.model.selected_habit import SelectedHabit
from strikechart.repository.reload_signal import ReloadSignal
from strikechart.repository.shared_store import SharedStore

logger = logging.getLogger(__name__)

SELECTED_HABIT_KEY = "selectedHabit"


class SelectedHabitRepository:
    def __init__(self, store: SharedStore, reload_signal: ReloadSignal) -> None:
        self.store = store
        self.reload_signal = reload_signal

    def __convert_selected_habit_for_serialization(
        self, selected_habit: SelectedHabit
    ) -> dict[str, Any]:
        return {
            "id": selected_habit["id"],
            "name": selected_habit["name"],
            "lastUpdated": time.datetime_to_iso_str(selected_habit["last_updated"]),
        }

    def __convert_selected_habit_for_deserialization(
        self, raw_selected_habit: dict[str, Any]
    ) -> SelectedHabit:
        return {
            "id": str(raw_selected_habit["id"]),
            "name": str(raw_selected_habit["name"]),
            "last_updated": time.datetime_from_str(raw_selected_habit["lastUpdated"]),
        }

    def save_selected_habit(self, selected_habit: SelectedHabit) -> None:
        self.store.write(
            SELECTED_HABIT_KEY,
            self.__convert_selected_habit_for_serialization(selected_habit),
        )

        # Widget refresh when the selection changes
        self.reload_signal.post()

    def get_selected_habit(self) -> Optional[SelectedHabit]:
        raw_selected_habit = self.store.read(SELECTED_HABIT_KEY)
        if raw_selected_habit is None:
            return None
        try:
            return self.__convert_selected_habit_for_deserialization(
                raw_selected_habit
            )
        except (KeyError, TypeError, ValueError) as e:
            logger.debug("discarding undecodable selected habit: %s", e)
            return None
