# SPDX-License-Identifier: MIT

from lenstrack.cleanup import register_cleanup
from lenstrack.initialize import initialize
from lenstrack.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
