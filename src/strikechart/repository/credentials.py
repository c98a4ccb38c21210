# SPDX-License-Identifier: MIT

import logging
from typing import Any, Optional

from strikechart.model.credentials import Credentials
from strikechart.repository.shared_store import SharedStore

logger = logging.getLogger(__name__)

CREDENTIALS_KEY = "credentials"


class CredentialsRepository:
    def __init__(self, store: SharedStore) -> None:
        self.store = store

    def __convert_credentials_for_serialization(
        self, credentials: Credentials
    ) -> dict[str, Any]:
        return {
            "userId": credentials["user_id"],
            "apiToken": credentials["api_token"],
        }

    def __convert_credentials_for_deserialization(
        self, raw_credentials: dict[str, Any]
    ) -> Credentials:
        user_id = raw_credentials["userId"]
        api_token = raw_credentials["apiToken"]
        if not isinstance(user_id, str) or not isinstance(api_token, str):
            raise TypeError("credentials must be strings")
        return {"user_id": user_id, "api_token": api_token}

    def save_credentials(self, user_id: str, api_token: str) -> None:
        credentials: Credentials = {"user_id": user_id, "api_token": api_token}
        self.store.write(
            CREDENTIALS_KEY, self.__convert_credentials_for_serialization(credentials)
        )

    def get_credentials(self) -> Optional[Credentials]:
        raw_credentials = self.store.read(CREDENTIALS_KEY)
        if raw_credentials is None:
            return None
        try:
            return self.__convert_credentials_for_deserialization(raw_credentials)
        except (KeyError, TypeError) as e:
            logger.debug("discarding undecodable credentials: %s", e)
            return None

    def clear_credentials(self) -> None:
        self.store.remove(CREDENTIALS_KEY)

    def is_authenticated(self) -> bool:
        return self.get_credentials() is not None
