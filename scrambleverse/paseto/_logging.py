import logging
import os
from ._config import LOG_LEVEL_ENV

__all__ = ["configure_logging"]

_DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure stdlib logging once.

    Respects the ``PASETO_CLI_LOG_LEVEL`` environment variable if ``level`` is
    None. The default level is WARNING, which keeps diagnostics out of the
    result and error channels.
    """
    lvl = (level or os.environ.get(LOG_LEVEL_ENV) or "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, lvl, logging.WARNING), format=_DEFAULT_FORMAT
    )
