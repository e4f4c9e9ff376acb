"""Logging infrastructure: console and rotating file output."""

from .setup import setup_logging, setup_simple_logging
from .handlers import ConsoleHandler, FileHandler
from .formatters import HumanFormatter, JsonFormatter

__all__ = [
    'setup_logging',
    'setup_simple_logging',
    'ConsoleHandler',
    'FileHandler',
    'HumanFormatter',
    'JsonFormatter'
]
