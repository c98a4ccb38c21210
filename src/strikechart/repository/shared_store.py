# SPDX-License-Identifier: MIT

import json
import logging
from pathlib import Path
from typing import Any, Optional

from strikechart.model.error import CacheWriteFailed

logger = logging.getLogger(__name__)


class SharedStore:
    """
    Key/value namespace shared by the CLI and the widget host.

    Each key is one JSON document on disk. Writes replace the whole
    document, so concurrent writers resolve as last-writer-wins.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def document_path(self, key: str) -> Path:
        return self.path / f"{key}.json"

    def read(self, key: str) -> Optional[Any]:
        file_path = self.document_path(key)
        if not file_path.is_file():
            return None
        try:
            return json.loads(file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.debug("unreadable document %s: %s", file_path, e)
            return None

    def write(self, key: str, document: Any) -> None:
        try:
            self.path.mkdir(parents=True, exist_ok=True)
            self.document_path(key).write_text(
                json.dumps(document, indent=2), encoding="utf-8"
            )
        except OSError as e:
            logger.warning("could not write %s to %s: %s", key, self.path, e)
            raise CacheWriteFailed() from e

    def remove(self, key: str) -> None:
        try:
            self.document_path(key).unlink(missing_ok=True)
        except OSError as e:
            logger.warning("could not remove %s from %s: %s", key, self.path, e)
            raise CacheWriteFailed() from e
