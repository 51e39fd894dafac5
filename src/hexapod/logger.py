"""
This module provides logging functionality for the Hexapod controller.
"""

import logging
from pathlib import Path

from hexapod.singleton import Singleton

HEXAPOD = 'Hexapod'


class Logger(metaclass=Singleton):
    """A singleton logger class for setting up logging handlers."""

    def __init__(self, logs_folder: str = 'logs/'):
        """Initialize the logger with file and stream handlers."""
        Path(logs_folder).mkdir(parents=True, exist_ok=True)

        # file handler receives everything, including debug messages
        self.logging_file_handler = logging.FileHandler(str(Path(logs_folder) / (HEXAPOD + '.log')))

        self.logging_stream_handler = logging.StreamHandler()

        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        self.logging_file_handler.setFormatter(formatter)
        self.logging_stream_handler.setFormatter(formatter)

        self._loggers: list[logging.Logger] = []
        self._stream_enabled = False

    def setup_logger(self, logger_name=None, enable_stream_handler=False):
        """Set up a logger with the given name and return it.

        Args:
            logger_name (str, optional): Name of the logger. Defaults to None.
            enable_stream_handler (bool): Whether to add the stream handler for console output. Defaults to False.

        Returns:
            logging.Logger: The configured logger.
        """
        if not logger_name:
            logger_name = HEXAPOD
        else:
            logger_name = HEXAPOD + ' ' + logger_name

        logger = logging.getLogger(f"{logger_name:<32}")

        logger.setLevel(logging.INFO)

        if self.logging_file_handler not in logger.handlers:
            logger.addHandler(self.logging_file_handler)
        if (enable_stream_handler or self._stream_enabled) and self.logging_stream_handler not in logger.handlers:
            logger.addHandler(self.logging_stream_handler)

        if logger not in self._loggers:
            self._loggers.append(logger)

        return logger

    def enable_console(self, level: int = logging.INFO) -> None:
        """Attach the stream handler to every logger created so far and to later ones.

        Called by the command line entry point once arguments are parsed.
        """
        self._stream_enabled = True
        for logger in self._loggers:
            logger.setLevel(level)
            if self.logging_stream_handler not in logger.handlers:
                logger.addHandler(self.logging_stream_handler)
