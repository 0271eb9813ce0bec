"""
Core services shared by the showcase components
"""
from .converters import (
    ConversionError,
    Converter,
    SimpleConverterAdapter,
    URLConverter,
    MaskConverter,
    IntegerConverter,
    DoubleConverter,
    DateConverter,
)
from .i18n import babel, init_i18n, set_session_locale, locale_display_name
from .logging_config import init_logging

__all__ = [
    'ConversionError',
    'Converter',
    'SimpleConverterAdapter',
    'URLConverter',
    'MaskConverter',
    'IntegerConverter',
    'DoubleConverter',
    'DateConverter',
    'babel',
    'init_i18n',
    'set_session_locale',
    'locale_display_name',
    'init_logging',
]
