import logging
import sys

from AQI.utils.settings import get_log_level

_HANDLER_NAME = "aqi-console"


def setup_logging() -> logging.Logger:
    """Configure a root logger with a simple console handler.

    The level comes from ``AQI_LOG_LEVEL``. Calling this again only
    updates the level.
    """
    root = logging.getLogger()
    root.setLevel(get_log_level())
    if any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        return root

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(_HANDLER_NAME)
    fmt = "%(asctime)s %(levelname)s [%(name)s:%(module)s:%(lineno)d] %(message)s"
    handler.setFormatter(logging.Formatter(fmt, datefmt="%Y-%m-%dT%H:%M:%S%z"))
    root.addHandler(handler)
    return root
