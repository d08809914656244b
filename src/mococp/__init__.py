# SPDX-License-Identifier: MIT

from mococp.cleanup import register_cleanup
from mococp.initialize import initialize
from mococp.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
