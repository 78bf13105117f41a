"""
This module provides logging functionality for the generator panel.

Curses owns the terminal while the panel is open, so loggers only write to a
file unless the stream handler is requested explicitly.
"""

import logging
import os
from pathlib import Path

from generator_panel.singleton import Singleton

GENERATOR_PANEL = 'GeneratorPanel'
LOG_DIR_ENV = 'GENERATOR_PANEL_LOG_DIR'


class Logger(metaclass=Singleton):
    """A singleton logger class for setting up logging handlers."""

    def __init__(self):
        """Initialize the logger with file and stream handlers."""
        logs_folder = Path(os.environ.get(LOG_DIR_ENV, 'logs'))
        logs_folder.mkdir(parents=True, exist_ok=True)

        # file handler receives everything the loggers let through
        self.logging_file_handler = logging.FileHandler(logs_folder / (GENERATOR_PANEL + '.log'))

        self.logging_stream_handler = logging.StreamHandler()

        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        self.logging_file_handler.setFormatter(formatter)
        self.logging_stream_handler.setFormatter(formatter)

    def setup_logger(self, logger_name=None, enable_stream_handler=False, level=logging.INFO):
        """Set up a logger with the given name and return it.

        Args:
            logger_name (str, optional): Name of the logger. Defaults to None.
            enable_stream_handler (bool): Whether to add the stream handler for console output. Defaults to False.
            level (int): Logging level for the returned logger. Defaults to logging.INFO.

        Returns:
            logging.Logger: The configured logger.
        """
        if not logger_name:
            logger_name = GENERATOR_PANEL
        else:
            logger_name = GENERATOR_PANEL + ' ' + logger_name

        logger = logging.getLogger(logger_name)

        logger.setLevel(level)

        if self.logging_file_handler not in logger.handlers:
            logger.addHandler(self.logging_file_handler)
        if enable_stream_handler and self.logging_stream_handler not in logger.handlers:
            logger.addHandler(self.logging_stream_handler)

        return logger

    def set_level(self, level) -> None:
        """Change the level of every logger created through this class."""
        for name, logger in logging.Logger.manager.loggerDict.items():
            if isinstance(logger, logging.Logger) and name.startswith(GENERATOR_PANEL):
                logger.setLevel(level)
