"""
Custom Exceptions for Astronomical Units of Measure

Exception hierarchy shared by the unit framework, the converter and the
configuration layer. Every exception carries a ``details`` dict that is
appended to its message.
"""

from typing import Any, Dict, List


class UomAstronomyError(Exception):
    """Base exception for all uom_astronomy errors"""

    def __init__(self, message: str, details: dict = None):
        self.details = details or {}
        super().__init__(message)

    def __str__(self):
        base_msg = self.args[0] if self.args else ""
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{base_msg} (Details: {detail_str})"
        return base_msg


class ValidationError(UomAstronomyError, ValueError):
    """Raised when a unit, converter or setting fails validation"""

    def __init__(self, message: str, field_name: str = None, value=None):
        details = {}
        if field_name:
            details['field'] = field_name
        if value is not None:
            details['value'] = str(value)
        super().__init__(message, details)


class ConversionError(UomAstronomyError, ValueError):
    """Raised when a value cannot be converted between two units"""

    def __init__(self, message: str, from_unit: str = None, to_unit: str = None):
        self.from_unit = from_unit
        self.to_unit = to_unit
        details = {}
        if from_unit:
            details['from_unit'] = from_unit
        if to_unit:
            details['to_unit'] = to_unit
        super().__init__(message, details)


class IncommensurableUnitsError(ConversionError):
    """Raised when two units do not measure the same dimension"""


class UnknownUnitError(UomAstronomyError, KeyError):
    """Raised when a unit symbol cannot be resolved"""

    def __init__(self, message: str, symbol: str = None):
        self.symbol = symbol
        details = {}
        if symbol is not None:
            details['symbol'] = symbol
        super().__init__(message, details)


class ConfigurationError(UomAstronomyError):
    """Raised when configuration is invalid"""

    def __init__(self, message: str, config_section: str = None, parameter: str = None):
        details = {}
        if config_section:
            details['section'] = config_section
        if parameter:
            details['parameter'] = parameter
        super().__init__(message, details)


# ===================================================================
# EXCEPTION UTILITIES
# ===================================================================

def create_error_summary(errors: List[Exception]) -> Dict[str, Any]:
    """
    Create summary of errors for reporting

    Args:
        errors: List of exceptions

    Returns:
        Dictionary with error summary
    """
    error_counts = {}
    error_details = []

    for error in errors:
        error_type = type(error).__name__
        error_counts[error_type] = error_counts.get(error_type, 0) + 1

        error_info = {
            'type': error_type,
            'message': str(error),
        }

        if hasattr(error, 'details'):
            error_info['details'] = error.details

        error_details.append(error_info)

    return {
        'total_errors': len(errors),
        'error_counts': error_counts,
        'error_details': error_details
    }
