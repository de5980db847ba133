"""Converter and logging settings"""

import logging
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Optional

from ..core.exceptions import ConfigurationError
from ..infrastructure.logging.logger import setup_logging

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass
class ConverterConfiguration:
    """
    Settings for a UnitConverter and the package logger

    Validated on construction; ``from_dict`` rejects unknown keys.
    """
    enable_caching: bool = True                    # Cache conversion factors
    cache_size: int = 256                          # Maximum cached factors
    log_level: str = 'WARNING'                     # Package logger level
    log_file: Optional[str] = None                 # Optional log file path

    def __post_init__(self):
        self.validate()

    def validate(self) -> bool:
        """
        Validate settings

        Returns:
            True if valid

        Raises:
            ConfigurationError: If a setting is invalid
        """
        if not isinstance(self.enable_caching, bool):
            raise ConfigurationError(f"enable_caching must be a bool, got {self.enable_caching!r}",
                                     'converter', 'enable_caching')

        if isinstance(self.cache_size, bool) or not isinstance(self.cache_size, int) or self.cache_size <= 0:
            raise ConfigurationError(f"cache_size must be a positive integer, got {self.cache_size!r}",
                                     'converter', 'cache_size')

        if str(self.log_level).upper() not in LOG_LEVELS:
            raise ConfigurationError(f"Unknown log level: {self.log_level!r}", 'logging', 'log_level')
        self.log_level = str(self.log_level).upper()

        return True

    def configure_logging(self) -> logging.Logger:
        """Apply the logging settings to the package logger"""
        return setup_logging(self.log_level, self.log_file)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ConverterConfiguration':
        """Create from dictionary"""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}",
                                     'converter', unknown[0])
        return cls(**data)
