# SPDX-License-Identifier: MIT

import atexit

from strikechart.repository.configuration import CONFIGURATION_REPO


def flush() -> None:
    # Cache documents are written synchronously; only config is buffered.
    CONFIGURATION_REPO.flush()


def register_cleanup() -> None:
    atexit.register(flush)
