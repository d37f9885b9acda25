from __future__ import annotations

import logging
import sys

LOGGER_NAME = "auditionprep"

logger = logging.getLogger(LOGGER_NAME)
if not logger.handlers:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
logger.setLevel(logging.WARNING)


def set_verbose(verbose: bool) -> None:
    logger.setLevel(logging.INFO if verbose else logging.WARNING)
