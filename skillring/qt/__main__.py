"""Run the demo through ``python -m skillring.qt [config.json]``."""

import logging
import sys

from .run_demo import run_demo


def main():
    logging.basicConfig(level=logging.INFO)
    path = sys.argv[1] if len(sys.argv) > 1 else None
    sys.exit(run_demo(path))


if __name__ == "__main__":
    main()
