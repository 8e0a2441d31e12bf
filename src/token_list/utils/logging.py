# utils/logging.py
from loguru import logger
import sys
from typing import Any, Optional, Union

from token_list.config import LOG_FORMAT, LOG_LEVEL, PACKAGE_NAME


class AppLogger:
    """Centralized logging configuration for the package.

    Records emitted by token_list are disabled until the application opts in
    with ``configure_logging``.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self):
        self.handler_id: Optional[int] = None
        logger.disable(PACKAGE_NAME)

    def configure(self, level: Optional[str] = None, sink: Any = None) -> int:
        """Enable package logging and route it to a single sink.

        Args:
            level: Minimum level, defaults to TOKEN_LIST_LOG_LEVEL
            sink: Any loguru sink, defaults to stderr

        Returns:
            The loguru handler id of the installed sink
        """
        if self.handler_id is not None:
            logger.remove(self.handler_id)

        self.handler_id = logger.add(
            sink if sink is not None else sys.stderr,
            format=LOG_FORMAT,
            level=level or LOG_LEVEL,
            filter=PACKAGE_NAME,
        )
        logger.enable(PACKAGE_NAME)
        return self.handler_id

    def disable(self):
        """Remove the installed sink and silence the package again."""
        if self.handler_id is not None:
            logger.remove(self.handler_id)
            self.handler_id = None
        logger.disable(PACKAGE_NAME)

    @staticmethod
    def get_logger(name: Union[str, None] = None):
        """Get a logger instance for a specific module"""
        return logger.bind(module=name if name else PACKAGE_NAME)


app_logger = AppLogger()


def get_logger(name: Union[str, None] = None):
    return app_logger.get_logger(name)


def configure_logging(level: Optional[str] = None, sink: Any = None) -> int:
    return app_logger.configure(level=level, sink=sink)


def disable_logging():
    app_logger.disable()
