# SPDX-License-Identifier: MIT


class PersistenceError(Exception):
    """Base class for failures reading or writing the cycle history."""

    description = "Lens cycle storage error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.description)


class EncodingFailedError(PersistenceError):
    description = "Failed to encode lens cycle data"


class DecodingFailedError(PersistenceError):
    description = "Failed to decode lens cycle data"


class SaveFailedError(PersistenceError):
    description = "Failed to save lens cycle to storage"


class NoCycleFoundError(PersistenceError):
    description = "No lens cycle found in storage"
