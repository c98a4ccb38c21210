# SPDX-License-Identifier: MIT

import logging
from typing import Optional

import pendulum

from strikechart import time
from strikechart.model.error import CacheWriteFailed
from strikechart.repository.shared_store import SharedStore

logger = logging.getLogger(__name__)

WIDGET_KIND = "HabitWidget"


class ReloadSignal:
    """
    Best-effort "please refresh your view" notification for the widget host.

    Posting stamps a small document in the shared store. Hosts compare the
    stamp against the moment they last built their timeline. There is no
    acknowledgement and no delivery guarantee.
    """

    def __init__(self, store: SharedStore) -> None:
        self.store = store

    def __key(self, kind: str) -> str:
        return f"reload-{kind}"

    def post(self, kind: str = WIDGET_KIND) -> None:
        try:
            self.store.write(
                self.__key(kind),
                {"kind": kind, "posted": time.datetime_to_iso_str(time.now_utc())},
            )
        except CacheWriteFailed as e:
            logger.warning("could not post %s reload: %s", kind, e.__cause__)
            return
        logger.info("triggered %s refresh", kind)

    def last_posted(self, kind: str = WIDGET_KIND) -> Optional[pendulum.DateTime]:
        document = self.store.read(self.__key(kind))
        if document is None:
            return None
        try:
            return time.datetime_from_str(document["posted"])
        except (KeyError, TypeError, ValueError):
            return None
