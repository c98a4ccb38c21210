# SPDX-License-Identifier: MIT


class StrikeChartError(Exception):
    """Base class for failures that end a user action."""

    description = "Something went wrong."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.description)

    @property
    def message(self) -> str:
        return str(self)


class HabiticaAPIError(StrikeChartError):
    description = "Habitica request failed."


class AuthenticationFailed(HabiticaAPIError):
    description = (
        "Failed to authenticate with Habitica. Please check your credentials."
    )


class FetchFailed(HabiticaAPIError):
    description = "Failed to fetch data from Habitica."


class ApiError(HabiticaAPIError):
    """The service answered but rejected the request."""

    def __init__(self, api_message: str) -> None:
        self.api_message = api_message
        super().__init__(f"Habitica API Error: {api_message}")


class DataManagerError(StrikeChartError):
    description = "Failed to refresh habit data."


class MissingCredentials(DataManagerError):
    description = "Habitica credentials not found. Please log in again."


class HabitNotFound(DataManagerError):
    description = "Selected habit not found. Please select a different habit."


class CacheWriteFailed(StrikeChartError):
    description = "Failed to save data. Please check that the data path is writable."
