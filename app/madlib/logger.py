"""
logger.py - Shared logger setup.
"""
__author__ = "Thomas J. Daley, J.D."
__version__ = "0.1.0"

import logging
import os
import sys

DEFAULT_LOGGER_NAME = "madlib"
LOG_LEVEL_ENV = "MADLIB_LOG_LEVEL"
LOG_FORMAT = "%(levelname)s - %(message)s"


class Logger(object):
    """
    Hands out loggers that write one line per message to standard error.

    Only the top "madlib" logger gets a handler. Loggers below it, e.g. "madlib.dictionary",
    pass their records up to it and share its level.
    """
    _configured = False

    @staticmethod
    def get_logger(name:str=DEFAULT_LOGGER_NAME)->logging.Logger:
        """
        Get a logger, setting up the stderr handler the first time through.

        The level comes from the MADLIB_LOG_LEVEL environment variable (e.g. "DEBUG")
        and defaults to INFO.

        Args:
            name (str): Logger name. Default = "madlib".

        Returns:
            (logging.Logger): The logger.
        """
        if not Logger._configured:
            top = logging.getLogger(DEFAULT_LOGGER_NAME)
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            top.addHandler(handler)
            top.setLevel(Logger.level_from_env())
            Logger._configured = True

        return logging.getLogger(name)

    @staticmethod
    def level_from_env(environ:dict=None)->int:
        """
        Map the MADLIB_LOG_LEVEL setting to a logging level.

        Args:
            environ (dict): Environment to read. Default = os.environ.

        Returns:
            (int): Logging level, INFO if unset or unrecognized.
        """
        environ = os.environ if environ is None else environ
        value = (environ.get(LOG_LEVEL_ENV) or "").strip().upper()
        level = getattr(logging, value, None) if value else None
        if isinstance(level, int):
            return level
        return logging.INFO
