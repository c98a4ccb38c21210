# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Literal, Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "strikechart"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# Shared namespace read by both the CLI and the widget host.
# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_LOG_PATH: Path = DATA_PATH / "strikechart.log"

DEFAULT_BASE_URL = "https://habitica.com/api/v3"
DEFAULT_CLIENT_NAME = "StrikeChart"

WidgetFamily = Literal["small", "medium"]


class Configuration(TypedDict):
    base_url: str
    client_name: str
    request_timeout: Optional[float]
    data_path: Optional[str]
    show_header: bool
    widget_family: WidgetFamily
    log_level: str
    log_to_file: bool


def get_default_configuration() -> Configuration:
    return {
        "base_url": DEFAULT_BASE_URL,
        "client_name": DEFAULT_CLIENT_NAME,
        "request_timeout": None,
        "data_path": None,
        "show_header": True,
        "widget_family": "small",
        "log_level": "WARNING",
        "log_to_file": True,
    }


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before any
    repositories are instantiated.
    """
    global DATA_PATH, DATA_LOG_PATH

    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return
    data_path_setting = config.get("data_path")

    if data_path_setting is not None:
        DATA_PATH = Path(data_path_setting)
        DATA_LOG_PATH = DATA_PATH / "strikechart.log"
