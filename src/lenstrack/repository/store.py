# SPDX-License-Identifier: MIT

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, Protocol

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class FileStore:
    """Stores each key as `<key>.json` in a directory.

    Writes go to a temporary file that then replaces the record, so readers
    see either the old or the new document and never a partial one.
    """

    suffix = ".json"

    def __init__(self, directory: Path) -> None:
        self.directory = directory

    def __path_for(self, key: str) -> Path:
        return self.directory / f"{key}{self.suffix}"

    def get(self, key: str) -> Optional[str]:
        file_path = self.__path_for(key)
        if not file_path.is_file():
            return None
        return file_path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        file_descriptor, temp_path = tempfile.mkstemp(
            dir=self.directory, prefix=f".{key}.", suffix=".tmp"
        )
        try:
            with os.fdopen(file_descriptor, "w", encoding="utf-8") as temp_file:
                temp_file.write(value)
            os.replace(temp_path, self.__path_for(key))
        except BaseException:
            Path(temp_path).unlink(missing_ok=True)
            raise

    def remove(self, key: str) -> None:
        self.__path_for(key).unlink(missing_ok=True)


class MemoryStore:
    """Process-local store, one isolated namespace per instance."""

    def __init__(self, namespace: str = "default") -> None:
        self.namespace = namespace
        self._records: dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        return self._records.get(key)

    def set(self, key: str, value: str) -> None:
        self._records[key] = value

    def remove(self, key: str) -> None:
        self._records.pop(key, None)

    def clear(self) -> None:
        self._records.clear()


def read_record(store: KeyValueStore, key: str) -> Optional[str]:
    """Read a record, treating an unreadable one the same as a missing one."""
    try:
        return store.get(key)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("could not read record %s: %s", key, e)
        return None
