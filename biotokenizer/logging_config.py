# biotokenizer/logging_config.py
import logging
import sys
from pathlib import Path
from typing import Optional, Union

from . import config

LOG_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "%(module)s.%(funcName)s:%(lineno)d - %(message)s"
)


def setup_logging(
    level: Union[str, int, None] = None,
    log_file: Union[str, Path, None] = None,
) -> logging.Logger:
    """
    Configures the root logger for a command-line run.

    - Logs go to stderr, stdout is left for the tokenized output.
    - When a log file is given (or BIOTOKENIZER_LOG_FILE is set) logs are
      written there as well.
    """
    logger = logging.getLogger()
    logger.setLevel(level or config.LOG_LEVEL)

    # Clear any existing handlers to avoid duplicate logging
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    log_file = log_file or config.LOG_FILE
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path, mode="w", encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
