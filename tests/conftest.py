# SPDX-License-Identifier: MIT

from pathlib import Path

import pytest

from strikechart import configuration
from strikechart.bootstrap import Services, build_services
from strikechart.repository.configuration import CONFIGURATION_REPO

from .fakes import FakeSession


@pytest.fixture()
def config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point config and data paths at a per-test directory."""
    config_path = tmp_path / "config"
    data_path = tmp_path / "data"
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_path)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path / "config.yaml")
    monkeypatch.setattr(configuration, "DATA_PATH", data_path)
    monkeypatch.setattr(configuration, "DATA_LOG_PATH", data_path / "strikechart.log")
    monkeypatch.setattr(CONFIGURATION_REPO, "_config", None)
    monkeypatch.setattr(CONFIGURATION_REPO, "is_dirty", False)
    return tmp_path


@pytest.fixture()
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture()
def services(config_dir: Path, session: FakeSession) -> Services:
    return build_services(
        configuration.get_default_configuration(),
        data_path=config_dir / "data",
        session=session,  # type: ignore[arg-type]
    )
