"""
WTForms fields backed by converters
"""
from flask_babel import get_locale
from wtforms import SelectMultipleField, StringField, widgets
from wtforms.validators import StopValidation

from .converters import DateConverter, DoubleConverter, IntegerConverter


def optional_text(value):
    """Coerce for choice fields where no selection is a valid state"""
    if value is None or value == '':
        return None
    return str(value)


class ConverterField(StringField):
    """Text field whose value goes through a converter

    Conversion uses the locale of the current request. A failed conversion
    becomes the field's only error; the remaining validators are skipped.
    """

    default_converter = None

    def __init__(self, label=None, validators=None, converter=None, **kwargs):
        super().__init__(label, validators, **kwargs)
        self.converter = converter

    def get_converter(self):
        if self.converter is not None:
            return self.converter
        return self.default_converter()

    def process_formdata(self, valuelist):
        if not valuelist:
            return
        self.data = None
        self.data = self.get_converter().convert_to_object(valuelist[0], get_locale())

    def pre_validate(self, form):
        if self.process_errors:
            raise StopValidation()

    def _value(self):
        if self.raw_data:
            return self.raw_data[0]
        return self.get_converter().convert_to_string(self.data, get_locale())


class LocaleIntegerField(ConverterField):
    default_converter = IntegerConverter


class LocaleFloatField(ConverterField):
    default_converter = DoubleConverter


class LocaleDateField(ConverterField):
    default_converter = DateConverter

    def date_pattern(self):
        return self.get_converter().pattern(get_locale())


class MultiCheckboxField(SelectMultipleField):
    """Multiple choice rendered as a group of check boxes"""
    widget = widgets.ListWidget(prefix_label=False)
    option_widget = widgets.CheckboxInput()
