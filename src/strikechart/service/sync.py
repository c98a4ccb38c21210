# SPDX-License-Identifier: MIT

import logging

from strikechart.client.habitica import HabiticaClient
from strikechart.model.credentials import Credentials
from strikechart.model.error import HabitNotFound, MissingCredentials
from strikechart.model.habit_data import HabitWidgetData
from strikechart.model.habitica import HabiticaTask, display_name, is_completed, is_daily
from strikechart.model.selected_habit import SelectedHabit
from strikechart.repository.credentials import CredentialsRepository
from strikechart.repository.habit_data import HabitDataRepository
from strikechart.repository.selected_habit import SelectedHabitRepository
from strikechart.service.habit_data import create_realistic_habit_data
from strikechart.time import now_utc

logger = logging.getLogger(__name__)


class HabitSync:
    """
    Coordinates the Habitica client with the shared cache.

    One instance is built per process and handed to the commands that
    need it; nothing here is looked up globally.
    """

    def __init__(
        self,
        client: HabiticaClient,
        credentials_repo: CredentialsRepository,
        selected_habit_repo: SelectedHabitRepository,
        habit_data_repo: HabitDataRepository,
    ) -> None:
        self.client = client
        self.credentials_repo = credentials_repo
        self.selected_habit_repo = selected_habit_repo
        self.habit_data_repo = habit_data_repo

    def __require_credentials(self) -> Credentials:
        credentials = self.credentials_repo.get_credentials()
        if credentials is None:
            raise MissingCredentials()
        return credentials

    def login_with_password(self, username: str, password: str) -> Credentials:
        login_response = self.client.login(username, password)
        self.credentials_repo.save_credentials(
            login_response["id"], login_response["api_token"]
        )
        logger.info("logged in as %s", login_response["id"])
        return {"user_id": login_response["id"], "api_token": login_response["api_token"]}

    def login_with_tokens(self, user_id: str, api_token: str) -> Credentials:
        self.client.authenticate(user_id, api_token)
        self.credentials_repo.save_credentials(user_id, api_token)
        logger.info("authenticated as %s", user_id)
        return {"user_id": user_id, "api_token": api_token}

    def logout(self) -> None:
        self.credentials_repo.clear_credentials()
        logger.info("cleared credentials")

    def is_authenticated(self) -> bool:
        return self.credentials_repo.is_authenticated()

    def fetch_available_habits(self) -> list[HabiticaTask]:
        """Daily tasks of the logged-in user, in server order."""
        credentials = self.__require_credentials()

        all_tasks = self.client.fetch_tasks(
            credentials["user_id"], credentials["api_token"]
        )
        daily_tasks = [task for task in all_tasks if is_daily(task)]

        logger.info(
            "filtered %d total tasks to %d daily tasks",
            len(all_tasks),
            len(daily_tasks),
        )
        return daily_tasks

    def select_habit(self, task: HabiticaTask) -> SelectedHabit:
        selected_habit: SelectedHabit = {
            "id": task["id"],
            "name": display_name(task),
            "last_updated": now_utc(),
        }
        self.selected_habit_repo.save_selected_habit(selected_habit)
        return selected_habit

    def refresh_habit_data(self) -> HabitWidgetData:
        credentials = self.credentials_repo.get_credentials()
        selected_habit = self.selected_habit_repo.get_selected_habit()
        if credentials is None or selected_habit is None:
            raise MissingCredentials()

        tasks = self.client.fetch_tasks(
            credentials["user_id"], credentials["api_token"]
        )
        habit = next((task for task in tasks if task["id"] == selected_habit["id"]), None)
        if habit is None:
            raise HabitNotFound()

        habit_data = create_realistic_habit_data(habit)
        self.habit_data_repo.save_habit_data(habit_data)

        logger.info(
            "saved habit data for %s (type: %s, completed: %s, streak: %s)",
            display_name(habit),
            habit["type"],
            is_completed(habit),
            habit["streak"] or 0,
        )
        return habit_data
