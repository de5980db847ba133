from .converter_config import ConverterConfiguration, LOG_LEVELS

__all__ = ['ConverterConfiguration', 'LOG_LEVELS']
