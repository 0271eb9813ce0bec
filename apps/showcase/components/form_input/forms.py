"""
Form Input Forms
Widget-to-property bindings for the form input page
"""
from flask_wtf import FlaskForm
from wtforms import (
    BooleanField,
    FieldList,
    Form,
    FormField,
    RadioField,
    SelectField,
    SelectMultipleField,
    StringField,
)
from wtforms.validators import AnyOf, InputRequired, NumberRange, Optional

from ...core.converters import MaskConverter, URLConverter
from ...core.fields import (
    ConverterField,
    LocaleDateField,
    LocaleFloatField,
    LocaleIntegerField,
    MultiCheckboxField,
    optional_text,
)
from .models import NUMBERS, SITES, Line, UsPhoneNumber

US_PHONE_MASK = '(###) ###-####'

# Upper bound on posted line entries
MAX_LINES = 20


class LineForm(Form):
    """Editor for a single Line; nested inside InputForm"""
    text = StringField('Line')


class InputForm(FlaskForm):
    """Form bound to a FormInputModel, field names match model properties"""

    string_property = StringField('String', validators=[InputRequired()])
    integer_property = LocaleIntegerField('Integer', validators=[InputRequired(), NumberRange(min=0)])
    double_property = LocaleFloatField('Double', validators=[InputRequired()])
    date_property = LocaleDateField('Date', validators=[Optional()])
    integer_in_range_property = LocaleIntegerField(
        'Integer (0-100)', validators=[InputRequired(), NumberRange(min=0, max=100)])
    boolean_property = BooleanField('Boolean')
    number_radio_choice = RadioField(
        'number',
        choices=[(n, n) for n in NUMBERS],
        validators=[InputRequired(), AnyOf(NUMBERS)],
        validate_choice=False,
    )
    numbers_group = RadioField(
        'Numbers group',
        choices=[(n, n) for n in NUMBERS],
        coerce=optional_text,
        validators=[Optional(), AnyOf(NUMBERS)],
        validate_choice=False,
    )
    numbers_check_group = MultiCheckboxField('Numbers check group', choices=[(n, n) for n in NUMBERS])
    site_selection = SelectMultipleField('Sites', choices=[(s, s) for s in SITES])
    url_property = ConverterField('URL', validators=[Optional()], converter=URLConverter())
    phone_number_us = ConverterField(
        'US phone number', validators=[Optional()], converter=MaskConverter(US_PHONE_MASK, UsPhoneNumber))
    # entries beyond the model's lines populate a new Line
    lines = FieldList(FormField(LineForm, default=Line), max_entries=MAX_LINES)


class LocaleForm(FlaskForm):
    """Locale drop-down; the selection binds to the page's locale property"""
    locale = SelectField('Locale', validators=[InputRequired()])
