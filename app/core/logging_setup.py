import logging
import os
from typing import Optional

from app.core.config import settings

ERROR_LOGGER_NAME = "app.errors"

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

def get_error_logger() -> logging.Logger:
    """Append-only sink for upstream failure identifiers ("no news", "no phrases")."""
    return logging.getLogger(ERROR_LOGGER_NAME)

def configure_error_log(path: Optional[str] = None) -> logging.Logger:
    """
    Attach a file handler to the error sink.

    Calling it again with a new path replaces the previous file handler,
    so tests can point the sink at a temporary file.
    """
    path = path or settings.ERROR_LOG_PATH
    error_logger = get_error_logger()
    for handler in list(error_logger.handlers):
        if isinstance(handler, logging.FileHandler):
            error_logger.removeHandler(handler)
            handler.close()

    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    file_handler = logging.FileHandler(path, mode="a", encoding="utf-8", delay=True)
    file_handler.setFormatter(logging.Formatter("%(asctime)s %(message)s"))
    error_logger.addHandler(file_handler)
    error_logger.setLevel(logging.ERROR)
    error_logger.propagate = False
    return error_logger

def configure_logging(level: Optional[str] = None) -> None:
    """Console logging for the app loggers plus the file-based error sink."""
    logging.basicConfig(level=(level or settings.LOG_LEVEL).upper(), format=_LOG_FORMAT)
    configure_error_log()
