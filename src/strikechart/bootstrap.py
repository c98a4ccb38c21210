# SPDX-License-Identifier: MIT

"""
Composition root.

Builds the client, the shared store and the repositories once per process
and hands them out as a single Services object.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import requests

from strikechart import configuration
from strikechart.client.habitica import HabiticaClient
from strikechart.repository.credentials import CredentialsRepository
from strikechart.repository.habit_data import HabitDataRepository
from strikechart.repository.reload_signal import ReloadSignal
from strikechart.repository.selected_habit import SelectedHabitRepository
from strikechart.repository.shared_store import SharedStore
from strikechart.service.sync import HabitSync
from strikechart.service.widget_host import WidgetHost


@dataclass
class Services:
    config: configuration.Configuration
    store: SharedStore
    reload_signal: ReloadSignal
    credentials_repo: CredentialsRepository
    selected_habit_repo: SelectedHabitRepository
    habit_data_repo: HabitDataRepository
    client: HabiticaClient
    sync: HabitSync

    def widget_host(self) -> WidgetHost:
        return WidgetHost(self.habit_data_repo, self.reload_signal)


def build_services(
    config: configuration.Configuration,
    data_path: Optional[Path] = None,
    session: Optional[requests.Session] = None,
) -> Services:
    if data_path is None:
        data_path = configuration.DATA_PATH

    store = SharedStore(data_path)
    reload_signal = ReloadSignal(store)
    credentials_repo = CredentialsRepository(store)
    selected_habit_repo = SelectedHabitRepository(store, reload_signal)
    habit_data_repo = HabitDataRepository(store, reload_signal)
    client = HabiticaClient(
        base_url=config["base_url"],
        client_name=config["client_name"],
        session=session,
        timeout=config["request_timeout"],
    )
    sync = HabitSync(client, credentials_repo, selected_habit_repo, habit_data_repo)

    return Services(
        config=config,
        store=store,
        reload_signal=reload_signal,
        credentials_repo=credentials_repo,
        selected_habit_repo=selected_habit_repo,
        habit_data_repo=habit_data_repo,
        client=client,
        sync=sync,
    )
