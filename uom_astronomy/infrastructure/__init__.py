"""
Infrastructure Module for uom_astronomy

Logging services shared by the unit framework and the registries.
"""

from .logging.logger import setup_logging, get_logger

__all__ = [
    'setup_logging',
    'get_logger'
]
