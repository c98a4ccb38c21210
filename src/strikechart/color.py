# SPDX-License-Identifier: MIT

# Contribution cell colors, indexed by completion level 0-4
CONTRIBUTION_LEVEL_COLORS = [
    "grey30",
    "dark_green",
    "green4",
    "green3",
    "bright_green",
]

COMPLETED_COLOR = "green"
PENDING_COLOR = "dark_orange"
STREAK_COLOR = "dark_orange"
ERROR_COLOR = "red"


def color_for_level(level: int) -> str:
    return CONTRIBUTION_LEVEL_COLORS[max(0, min(level, len(CONTRIBUTION_LEVEL_COLORS) - 1))]
