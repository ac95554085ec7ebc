from pathlib import Path
from typing import Callable

import pendulum
import pytest
from yaml import dump

from lenstrack import configuration
from lenstrack import state as app_state
from lenstrack.model.lens_cycle import LensCycle
from lenstrack.model.lens_type import LensType
from lenstrack.repository.configuration import CONFIGURATION_REPO
from lenstrack.repository.cycle import CycleRepository
from lenstrack.repository.store import MemoryStore
from lenstrack.service.tracker import LensTracker
from lenstrack.time import today_local


@pytest.fixture
def today() -> pendulum.Date:
    return today_local()


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore("test")


@pytest.fixture
def repository(store: MemoryStore) -> CycleRepository:
    return CycleRepository(store)


@pytest.fixture
def tracker(repository: CycleRepository) -> LensTracker:
    return LensTracker(repository)


@pytest.fixture
def biweekly_cycle(today: pendulum.Date) -> LensCycle:
    """Biweekly cycle worn on the last seven days, today included."""
    return LensCycle(
        start_date=today.subtract(days=10),
        lens_type=LensType.BIWEEKLY,
        wear_dates=tuple(today.subtract(days=offset) for offset in range(7)),
    )


@pytest.fixture
def cycle_factory(today: pendulum.Date) -> Callable[[LensType, int], LensCycle]:
    """Build a cycle worn on the last `days_worn` consecutive days."""

    def make_cycle(lens_type: LensType, days_worn: int) -> LensCycle:
        return LensCycle(
            start_date=today.subtract(days=days_worn),
            lens_type=lens_type,
            wear_dates=tuple(today.subtract(days=offset) for offset in range(days_worn)),
        )

    return make_cycle


@pytest.fixture
def config_paths(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point configuration and data paths at a temporary directory."""
    config_dir = tmp_path / "config"
    data_dir = tmp_path / "data"
    config_dir.mkdir()
    data_dir.mkdir()

    config_path = config_dir / "config.yaml"
    config_path.write_text(dump(dict(configuration.get_default_configuration())))

    monkeypatch.setattr(configuration, "CONFIG_PATH", config_dir)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path)
    monkeypatch.setattr(configuration, "DATA_PATH", data_dir)
    monkeypatch.setattr(CONFIGURATION_REPO, "_config", None)
    monkeypatch.setattr(CONFIGURATION_REPO, "is_dirty", False)
    app_state.set_show_header(True)
    return tmp_path
