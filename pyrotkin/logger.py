# Copyright 2024 inuex35
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Logging configuration for pyrotkin

Library modules log through ``logging.getLogger(__name__)`` and therefore sit
below the package logger ``"pyrotkin"``. Nothing is printed unless an
application attaches handlers, e.g. with :func:`setup_logger` or
:func:`setup_logger_from_config`.
"""

import logging
import sys
from enum import Enum
from typing import Optional

ROOT_LOGGER_NAME = "pyrotkin"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class LogLevel(Enum):
    """Log levels understood by the configuration helpers"""
    TRACE = 5
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


logging.addLevelName(LogLevel.TRACE.value, "TRACE")


def _trace(self, message, *args, **kwargs):
    if self.isEnabledFor(LogLevel.TRACE.value):
        self._log(LogLevel.TRACE.value, message, args, **kwargs)


logging.Logger.trace = _trace


def level_value(level: str) -> int:
    """
    Numeric value of a level name.

    Raises
    ------
    ValueError
        If the name is not one of TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL
    """
    try:
        return LogLevel[level.upper()].value
    except KeyError:
        raise ValueError(f"Unknown log level '{level}', expected one of "
                         f"{[lv.name for lv in LogLevel]}") from None


class ColoredFormatter(logging.Formatter):
    """Console formatter that colours the level name"""

    COLORS = {
        'TRACE': '\033[36m',     # Cyan
        'DEBUG': '\033[34m',     # Blue
        'INFO': '\033[32m',      # Green
        'WARNING': '\033[33m',   # Yellow
        'ERROR': '\033[31m',     # Red
        'CRITICAL': '\033[35m',  # Magenta
    }
    RESET = '\033[0m'

    def format(self, record):
        # the record is shared with other handlers, colour a copy only
        record = logging.makeLogRecord(record.__dict__)
        color = self.COLORS.get(record.levelname, self.RESET)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


def setup_logger(name: str = ROOT_LOGGER_NAME,
                 level: str = "INFO",
                 log_file: Optional[str] = None,
                 console: bool = True) -> logging.Logger:
    """
    Configure a logger, replacing any handlers it already has.

    Parameters
    ----------
    name : str
        Logger name, the package logger by default
    level : str
        Log level (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_file : Optional[str]
        Log file path (if None, no file logging)
    console : bool
        Log coloured records to stdout

    Returns
    -------
    logging.Logger
        Configured logger

    Raises
    ------
    ValueError
        If level is not a known level name
    """
    value = level_value(level)
    logger = logging.getLogger(name)
    logger.setLevel(value)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(value)
        console_handler.setFormatter(ColoredFormatter(LOG_FORMAT, datefmt='%H:%M:%S'))
        logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(value)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        logger.addHandler(file_handler)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Package logger, or the logger of a pyrotkin sub module"""
    if name is None or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


class LogContext:
    """
    Temporarily change the level of a logger.

    Examples
    --------
    >>> with LogContext(get_logger("rotations"), "DEBUG") as logger:
    ...     logger.debug("checking attitude")
    """

    def __init__(self, logger: logging.Logger, level: str):
        self.logger = logger
        self.new_level = level_value(level)
        self.old_level = None

    def __enter__(self):
        self.old_level = self.logger.level
        self.logger.setLevel(self.new_level)
        return self.logger

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.logger.setLevel(self.old_level)


class LoggerConfig:
    """Per-module log levels on top of a default level"""

    def __init__(self):
        self.module_levels = {}
        self.default_level = "WARNING"
        self.log_file = None
        self.console = True

    def set_module_level(self, module_name: str, level: str):
        """Set the level of one module, e.g. ``'pyrotkin.rotations.conversions'``"""
        value = level_value(level)
        self.module_levels[module_name] = level
        logging.getLogger(module_name).setLevel(value)

    def set_default_level(self, level: str):
        """Set the level of the package logger"""
        level_value(level)
        self.default_level = level

    def get_level_for_module(self, module_name: str) -> str:
        """Configured level of a module, falling back to the default level"""
        return self.module_levels.get(module_name, self.default_level)

    def configure_from_dict(self, config: dict):
        """Read 'default_level', 'log_file', 'console' and 'module_levels'"""
        if 'default_level' in config:
            self.set_default_level(config['default_level'])
        if 'log_file' in config:
            self.log_file = config['log_file']
        if 'console' in config:
            self.console = config['console']
        for module, level in config.get('module_levels', {}).items():
            self.set_module_level(module, level)

    def setup_all_loggers(self) -> logging.Logger:
        """Attach handlers to the package logger and apply the module levels"""
        logger = setup_logger(ROOT_LOGGER_NAME, self.default_level, self.log_file, self.console)
        # module records must pass the package handlers
        lowest = min([level_value(self.default_level)]
                     + [level_value(lv) for lv in self.module_levels.values()])
        for handler in logger.handlers:
            handler.setLevel(lowest)
        for module, level in self.module_levels.items():
            logging.getLogger(module).setLevel(level_value(level))
        return logger


logger_config = LoggerConfig()


def setup_logger_from_config(config: dict) -> logging.Logger:
    """Setup loggers from a configuration dictionary

    Example config:
    {
        'default_level': 'INFO',
        'log_file': 'pyrotkin.log',
        'console': True,
        'module_levels': {
            'pyrotkin.rotations.conversions': 'DEBUG',
            'pyrotkin.rotations.singularity': 'TRACE',
        }
    }
    """
    logger_config.configure_from_dict(config)
    return logger_config.setup_all_loggers()
