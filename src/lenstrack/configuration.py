# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Literal, Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "lenstrack"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# Overridden by load_data_path_configuration() when data_path is set
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)

WeekStart = Literal["sunday", "monday"]


class Configuration(TypedDict):
    data_path: Optional[str]
    show_header: bool
    default_lens_type: str
    log_level: str
    week_start: WeekStart
    recent_entries_limit: int


def get_default_configuration() -> Configuration:
    return {
        "data_path": None,
        "show_header": True,
        "default_lens_type": "biweekly",
        "log_level": "WARNING",
        "week_start": "sunday",
        "recent_entries_limit": 10,
    }


def load_data_path_configuration() -> None:
    """
    Point DATA_PATH at the configured data directory.

    This must be called after the config file exists and before the cycle
    repository is built.
    """
    global DATA_PATH

    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return

    data_path_setting = config.get("data_path")
    if data_path_setting is not None:
        DATA_PATH = Path(data_path_setting).expanduser()
