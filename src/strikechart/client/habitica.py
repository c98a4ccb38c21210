# SPDX-License-Identifier: MIT

import logging
from typing import Any, Optional

import requests

from strikechart.configuration import DEFAULT_BASE_URL, DEFAULT_CLIENT_NAME
from strikechart.model.error import ApiError, AuthenticationFailed, FetchFailed
from strikechart.model.habitica import (
    HabiticaTask,
    HabiticaUser,
    LoginResponse,
    login_response_from_json,
    task_from_json,
    user_from_json,
)

logger = logging.getLogger(__name__)


class HabiticaClient:
    """
    Thin wrapper over the three Habitica v3 endpoints the app needs.

    Every call is a single attempt. Responses are wrapped in the
    ``{success, data, message}`` envelope; a non-200 status or
    ``success: false`` ends the call with an exception.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        client_name: str = DEFAULT_CLIENT_NAME,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.client_name = client_name
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    def __identity_headers(self, user_id: str, api_token: str) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "x-api-user": user_id,
            "x-api-key": api_token,
        }

    def __request(
        self,
        method: str,
        path: str,
        headers: dict[str, str],
        json: Optional[dict[str, Any]] = None,
    ) -> requests.Response:
        url = f"{self.base_url}{path}"
        logger.debug("%s %s", method, url)
        try:
            response = self.session.request(
                method, url, headers=headers, json=json, timeout=self.timeout
            )
        except requests.RequestException as e:
            logger.warning("%s %s failed: %s", method, url, e)
            raise FetchFailed() from e
        logger.debug("%s %s -> %s", method, url, response.status_code)
        return response

    def __unwrap(self, response: requests.Response, default_message: str) -> Any:
        try:
            envelope = response.json()
            success = envelope["success"]
        except (ValueError, KeyError, TypeError) as e:
            logger.debug("unexpected response body: %s", response.text)
            raise FetchFailed() from e

        if not success:
            raise ApiError(envelope.get("message") or default_message)
        return envelope.get("data")

    def authenticate(self, user_id: str, api_token: str) -> HabiticaUser:
        """Verify a user id / API token pair against ``GET /user``."""
        response = self.__request(
            "GET", "/user", self.__identity_headers(user_id, api_token)
        )
        if response.status_code != 200:
            raise AuthenticationFailed()

        data = self.__unwrap(response, "Unknown error")
        try:
            return user_from_json(data)
        except (KeyError, TypeError, AttributeError) as e:
            raise FetchFailed() from e

    def login(self, username: str, password: str) -> LoginResponse:
        """Exchange a username and password for a long-lived id/token pair."""
        headers = {
            "Content-Type": "application/json",
            "x-client": f"{self.client_name}-Login",
        }
        response = self.__request(
            "POST",
            "/user/auth/local/login",
            headers,
            json={"username": username, "password": password},
        )
        if response.status_code != 200:
            raise AuthenticationFailed()

        data = self.__unwrap(response, "Invalid credentials")
        try:
            return login_response_from_json(data)
        except (KeyError, TypeError) as e:
            raise FetchFailed() from e

    def fetch_tasks(self, user_id: str, api_token: str) -> list[HabiticaTask]:
        """Fetch every task of the authenticated user (all types)."""
        headers = self.__identity_headers(user_id, api_token)
        headers["x-client"] = f"{user_id}-{self.client_name}"

        response = self.__request("GET", "/tasks/user", headers)
        if response.status_code != 200:
            logger.debug("API error response: %s", response.text)
            raise ApiError(f"HTTP {response.status_code}: {response.text}")

        logger.debug("API response: %s", response.text)
        data = self.__unwrap(response, "Unknown error")
        try:
            return [task_from_json(raw_task) for raw_task in data]
        except (KeyError, TypeError) as e:
            raise FetchFailed() from e
