# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from strikechart import configuration


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        if configuration.APP_CONFIG_PATH.is_file():
            self._config = load(
                configuration.APP_CONFIG_PATH.read_text(), Loader=Loader
            )
        if self._config is None:
            self._config = configuration.get_default_configuration()

        # Migration: back-fill any setting added after the file was written
        defaults = configuration.get_default_configuration()
        for key, value in defaults.items():
            if key not in self._config:
                self._config[key] = value  # type: ignore[literal-required]

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))

    def flush(self) -> bool:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False
            return True
        return False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        base_url: Optional[str] = None,
        client_name: Optional[str] = None,
        request_timeout: Optional[float] = None,
        remove_request_timeout: bool = False,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
        show_header: Optional[bool] = None,
        widget_family: Optional[configuration.WidgetFamily] = None,
        log_level: Optional[str] = None,
        log_to_file: Optional[bool] = None,
    ) -> None:
        self.is_dirty = True

        if base_url is not None:
            self.config["base_url"] = base_url.rstrip("/")
        if client_name is not None:
            self.config["client_name"] = client_name
        if request_timeout is not None:
            self.config["request_timeout"] = request_timeout
        if remove_request_timeout:
            self.config["request_timeout"] = None
        if data_path is not None:
            self.config["data_path"] = data_path
        if remove_data_path:
            self.config["data_path"] = None
        if show_header is not None:
            self.config["show_header"] = show_header
        if widget_family is not None:
            self.config["widget_family"] = widget_family
        if log_level is not None:
            self.config["log_level"] = log_level.upper()
        if log_to_file is not None:
            self.config["log_to_file"] = log_to_file


CONFIGURATION_REPO = ConfigurationRepository()
