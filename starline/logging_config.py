"""
Console (and optional file) logging for the 'starline' logger tree.
"""
import logging
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Attach handlers to the 'starline' logger and return it.

    Args:
        level: threshold for the logger and every handler.
        log_file: if set, also write the session log there (truncated on start).
    """
    root = logging.getLogger("starline")
    root.setLevel(level)
    # calling twice replaces handlers instead of stacking them
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root.addHandler(handler)

    root.debug(f"Logging to {len(handlers)} handler(s)")
    return root
