"""
__main__.py
-----------
Entry point: ``python -m wrath`` or the ``wrath`` console script.
"""

import sys

from wrath.core.runtime.game_loop import GameLoop


def main():
    GameLoop().run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
