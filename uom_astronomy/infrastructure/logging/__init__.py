from .logger import PACKAGE_LOGGER_NAME, get_logger, setup_logging

__all__ = ['PACKAGE_LOGGER_NAME', 'get_logger', 'setup_logging']
