# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum


class SelectedHabit(TypedDict):
    id: str  # Habitica task id
    name: str  # Display name at the time of selection
    last_updated: pendulum.DateTime
