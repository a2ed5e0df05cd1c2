#
# PROJECT: wireframe-projector
# MODULE: wireframe_projector/logging_config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import logging
import sys
from typing import Optional

LOGGER_NAME = 'wireframe_projector'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None,
                  console: bool = True) -> logging.Logger:
    """
    Configures the 'wireframe_projector' namespace logger.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
        console: Log to stderr as well. Turn this off while curses owns
            the terminal.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Avoid duplicate output when called more than once
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    logger.debug("Logging initialized.")
    return logger
