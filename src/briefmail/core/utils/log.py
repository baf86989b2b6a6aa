"""Process-wide logging setup with a single stream handler"""

import logging
import os

_HANDLER_ATTACHED = False
_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _resolve_level(level: str | None = None) -> int:
    name = (level or os.getenv("BRIEFMAIL_LOG_LEVEL", "INFO")).upper()
    return getattr(logging, name, logging.INFO)


def configure(level: str | None = None) -> None:
    """Attach the stream handler once and set the root level."""
    global _HANDLER_ATTACHED

    if not _HANDLER_ATTACHED:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logging.getLogger().addHandler(handler)
        _HANDLER_ATTACHED = True
    logging.getLogger().setLevel(_resolve_level(level))


def get_logger(name: str) -> logging.Logger:
    """Return a module logger; handler attachment is deferred to configure()."""
    return logging.getLogger(name)
