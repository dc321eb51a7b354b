"""Logging setup for the command-line and TUI hosts."""
import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str = "WARNING", handler: Optional[logging.Handler] = None) -> None:
    """Send ``equip_refine`` log records to ``handler`` at ``level``.

    Without a handler records go to stderr. Unknown level names fall back
    to WARNING.
    """
    numeric = getattr(logging, str(level).upper(), logging.WARNING)
    if not isinstance(numeric, int):
        numeric = logging.WARNING
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logging.basicConfig(level=numeric, handlers=[handler])
    logging.getLogger("equip_refine").setLevel(numeric)
