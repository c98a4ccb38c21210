# SPDX-License-Identifier: MIT

from strikechart.cleanup import register_cleanup
from strikechart.initialize import initialize
from strikechart.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
