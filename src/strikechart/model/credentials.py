# SPDX-License-Identifier: MIT

from typing import TypedDict


class Credentials(TypedDict):
    user_id: str  # persisted as "userId", sent as x-api-user
    api_token: str  # persisted as "apiToken", sent as x-api-key
