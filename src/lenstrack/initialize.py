# SPDX-License-Identifier: MIT

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from lenstrack import configuration
from lenstrack import state as app_state
from lenstrack.logger import setup_logging
from lenstrack.repository.configuration import CONFIGURATION_REPO
from lenstrack.repository.cycle import CycleRepository
from lenstrack.repository.store import FileStore


def initialize() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    __ensure_config_file()

    configuration.load_data_path_configuration()
    configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)

    config = CONFIGURATION_REPO.get_config()
    setup_logging(config["log_level"])
    app_state.set_show_header(config["show_header"])


def build_cycle_repository() -> CycleRepository:
    return CycleRepository(FileStore(configuration.DATA_PATH))


def __ensure_config_file() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        config = configuration.get_default_configuration()
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))
