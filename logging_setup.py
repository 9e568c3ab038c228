"""
Logging Setup
=============
Console logging for the logo engine and its demo entry point.
"""

import logging
import sys

from settings import LOG_DATEFMT, LOG_FORMAT, LOG_LEVEL

_configured = False


def setup_logging(level=None):
    """Configure root logging once; later calls only adjust the level"""
    global _configured
    level = (level or LOG_LEVEL).upper()
    root = logging.getLogger()
    root.setLevel(getattr(logging, level, logging.INFO))

    if _configured:
        return root

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
    root.addHandler(handler)

    # Pillow is chatty at DEBUG
    logging.getLogger('PIL').setLevel(logging.WARNING)

    _configured = True
    return root
