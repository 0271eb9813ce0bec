"""
Value converters between form text and typed model values

Locale-aware number and date handling is done with Babel.
"""
import re
from datetime import date
from urllib.parse import urlsplit

from babel import Locale
from babel.dates import format_date, parse_date
from babel.numbers import NumberFormatError, format_decimal, parse_decimal, parse_number

URL_SCHEMES = ('http', 'https', 'ftp', 'file', 'mailto', 'jar')

ISO_DATE = re.compile(r'^\d{4}-\d{2}-\d{2}$')


class ConversionError(ValueError):
    """Text could not be converted to the target type"""


class Converter:
    """Maps a text input to a typed value and back"""

    def convert_to_object(self, text, locale=None):
        raise NotImplementedError

    def convert_to_string(self, value, locale=None):
        raise NotImplementedError


class SimpleConverterAdapter(Converter):
    """Converter that handles blanks and leaves the rest to subclasses

    Subclasses implement to_object() and to_string() for non-empty values.
    """

    def convert_to_object(self, text, locale=None):
        if text is None:
            return None
        text = text.strip()
        if not text:
            return None
        return self.to_object(text, locale)

    def convert_to_string(self, value, locale=None):
        if value is None:
            return ''
        return self.to_string(value, locale)

    def to_object(self, text, locale=None):
        raise NotImplementedError

    def to_string(self, value, locale=None):
        return str(value)


class IntegerConverter(SimpleConverterAdapter):
    def to_object(self, text, locale=None):
        try:
            return parse_number(text, locale=locale or 'en')
        except (NumberFormatError, ValueError):
            raise ConversionError(f"'{text}' is not a valid integer")

    def to_string(self, value, locale=None):
        return format_decimal(value, locale=locale or 'en')


class DoubleConverter(SimpleConverterAdapter):
    def to_object(self, text, locale=None):
        try:
            value = parse_decimal(text, locale=locale or 'en')
        except (NumberFormatError, ValueError):
            raise ConversionError(f"'{text}' is not a valid number")
        if not value.is_finite():
            raise ConversionError(f"'{text}' is not a valid number")
        return float(value)

    def to_string(self, value, locale=None):
        return format_decimal(value, locale=locale or 'en', decimal_quantization=False)


class DateConverter(SimpleConverterAdapter):
    """Dates in the locale's short format, always with a four digit year

    ISO dates (yyyy-mm-dd), as sent by the browser's date picker, are
    accepted in every locale.
    """

    def pattern(self, locale=None):
        short = Locale.parse(locale or 'en').date_formats['short'].pattern
        return re.sub(r'y+', 'yyyy', short)

    def to_object(self, text, locale=None):
        try:
            if ISO_DATE.match(text):
                return date.fromisoformat(text)
            return parse_date(text, locale=locale or 'en', format='short')
        except (ValueError, IndexError):
            raise ConversionError(f"'{text}' is not a valid date")

    def to_string(self, value, locale=None):
        return format_date(value, self.pattern(locale), locale=locale or 'en')


class URLConverter(SimpleConverterAdapter):
    """Parses text into a URL split result"""

    def to_object(self, text, locale=None):
        try:
            url = urlsplit(text)
        except ValueError:
            raise ConversionError(f"'{text}' is not a valid URL")
        if url.scheme not in URL_SCHEMES or not (url.netloc or url.path):
            raise ConversionError(f"'{text}' is not a valid URL")
        return url

    def to_string(self, value, locale=None):
        return value.geturl()


class MaskConverter(SimpleConverterAdapter):
    """Converts text matching a fixed-width input mask

    Mask characters: ``#`` digit, ``?`` letter, ``A`` letter or digit,
    ``U`` letter (upper-cased), ``L`` letter (lower-cased), ``H`` hex digit,
    ``*`` anything. Any other character must appear literally. A matching
    value is passed to ``value_type``.
    """

    PLACEHOLDERS = {
        '#': str.isdigit,
        '?': str.isalpha,
        'A': str.isalnum,
        'U': str.isalpha,
        'L': str.isalpha,
        'H': lambda c: c in '0123456789abcdefABCDEF',
        '*': lambda c: True,
    }

    def __init__(self, mask, value_type=str):
        self.mask = mask
        self.value_type = value_type

    def to_object(self, text, locale=None):
        if len(text) != len(self.mask):
            raise ConversionError(f"'{text}' does not match mask '{self.mask}'")
        chars = []
        for m, c in zip(self.mask, text):
            check = self.PLACEHOLDERS.get(m)
            if check is None:
                if c != m:
                    raise ConversionError(f"'{text}' does not match mask '{self.mask}'")
            elif not check(c):
                raise ConversionError(f"'{text}' does not match mask '{self.mask}'")
            elif m == 'U':
                c = c.upper()
            elif m == 'L':
                c = c.lower()
            chars.append(c)
        return self.value_type(''.join(chars))
