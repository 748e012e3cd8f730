import logging
import sys
from typing import Optional, Union

from function_queue.config import config

_CONFIGURED = False


def setup_logging(level: Optional[Union[int, str]] = None):
    """
    Configure logging idempotently.
    Safe to call multiple times.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    root = logging.getLogger()
    if root.handlers:
        # Someone else owns the root handlers; leave them alone
        _CONFIGURED = True
        return

    logging.basicConfig(
        level=level if level is not None else config.log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )
    _CONFIGURED = True
