"""Open the PyQt6 demo window with the skills from skills.json."""

import logging
import sys
from pathlib import Path

from skillring import log
from skillring.qt import run_demo


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    log.set_level(logging.DEBUG)
    sys.exit(run_demo(Path(__file__).with_name("skills.json")))
