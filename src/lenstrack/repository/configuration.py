# SPDX-License-Identifier: MIT

from copy import deepcopy
from pathlib import Path
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from lenstrack import configuration
from lenstrack.model.lens_type import LensType


class ConfigurationRepository:
    def __init__(self, config_path: Optional[Path] = None) -> None:
        self._config_path = config_path
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config_path(self) -> Path:
        if self._config_path is not None:
            return self._config_path
        return configuration.APP_CONFIG_PATH

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        self._config = load(self.config_path.read_text(), Loader=Loader)

        if self._config is None:
            raise ValueError(f"empty configuration file: {self.config_path}")

        # Fill in settings added after the file was first written
        for key, value in configuration.get_default_configuration().items():
            if key not in self._config:
                self._config[key] = value  # type: ignore[literal-required]

    def __save_data(self, config: configuration.Configuration) -> None:
        self.config_path.write_text(dump(dict(config), Dumper=Dumper))

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
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
        show_header: Optional[bool] = None,
        default_lens_type: Optional[LensType] = None,
        log_level: Optional[str] = None,
        week_start: Optional[configuration.WeekStart] = None,
        recent_entries_limit: Optional[int] = None,
    ) -> None:
        self.is_dirty = True

        if data_path is not None:
            self.config["data_path"] = data_path
        if remove_data_path:
            self.config["data_path"] = None
        if show_header is not None:
            self.config["show_header"] = show_header
        if default_lens_type is not None:
            self.config["default_lens_type"] = default_lens_type.value
        if log_level is not None:
            self.config["log_level"] = log_level.upper()
        if week_start is not None:
            self.config["week_start"] = week_start
        if recent_entries_limit is not None:
            if recent_entries_limit < 1:
                raise ValueError(
                    f"recent_entries_limit must be positive, got {recent_entries_limit}"
                )
            self.config["recent_entries_limit"] = recent_entries_limit


CONFIGURATION_REPO = ConfigurationRepository()
