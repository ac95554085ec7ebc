# SPDX-License-Identifier: MIT

import atexit

from lenstrack.repository.configuration import CONFIGURATION_REPO


def flush_configuration() -> None:
    # The cycle history is written through on every change; only the
    # configuration is buffered.
    CONFIGURATION_REPO.flush()


def register_cleanup() -> None:
    atexit.register(flush_configuration)
