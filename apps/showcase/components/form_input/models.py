"""
Form Input Model
Request/session scoped state edited by the form input page
"""
from datetime import date
from urllib.parse import urlsplit

# Available numbers for the radio and check selections
NUMBERS = ['1', '2', '3']

# Available sites for the multiple select
SITES = ['The Server Side', 'Java Lobby', 'Java.Net']


class UsPhoneNumber:
    """US phone number, already formatted as (###) ###-####"""

    def __init__(self, number):
        self.number = number

    def __eq__(self, other):
        return isinstance(other, UsPhoneNumber) and other.number == self.number

    def __hash__(self):
        return hash(self.number)

    def __str__(self):
        return self.number

    def __repr__(self):
        return f'UsPhoneNumber({self.number!r})'


class Line:
    """One free-text line, edited in place by the nested line list"""

    def __init__(self, text=None):
        self.text = text

    def __str__(self):
        return self.text or ''

    def __repr__(self):
        return f'Line({self.text!r})'


class FormInputModel:
    """Compound model behind the input form"""

    def __init__(self):
        self.string_property = 'test'
        self.integer_property = 100
        self.double_property = 20.5
        self.date_property = date.today()
        self.integer_in_range_property = 50
        self.boolean_property = False
        self.number_radio_choice = NUMBERS[0]
        self.numbers_group = None
        self.numbers_check_group = set()
        self.site_selection = [SITES[0], SITES[1]]
        self.url_property = urlsplit('http://wicket.sourceforge.net')
        self.phone_number_us = UsPhoneNumber('(123) 456-1234')
        self.lines = [Line('line one'), Line('line two'), Line('line three')]

    @property
    def numbers_check_group(self):
        return self._numbers_check_group

    @numbers_check_group.setter
    def numbers_check_group(self, value):
        self._numbers_check_group = set(value or ())

    def __str__(self):
        url = self.url_property.geturl() if self.url_property is not None else None
        return (
            f"[FormInputModel string_property = '{self.string_property}'"
            f", integer_property = {self.integer_property}"
            f", double_property = {self.double_property}"
            f", date_property = {self.date_property}"
            f", boolean_property = {self.boolean_property}"
            f", integer_in_range_property = {self.integer_in_range_property}"
            f", url_property = {url}"
            f", phone_number_us = {self.phone_number_us}"
            f", number_radio_choice = {self.number_radio_choice}"
            f", numbers_check_group = {sorted(self.numbers_check_group)}"
            f", numbers_group = {self.numbers_group}"
            f", site_selection = {self.site_selection}"
            f", lines = [{', '.join(str(line) for line in self.lines)}]]"
        )

    def to_dict(self):
        """JSON-safe representation for session storage"""
        return {
            'string_property': self.string_property,
            'integer_property': self.integer_property,
            'double_property': self.double_property,
            'date_property': self.date_property.isoformat() if self.date_property else None,
            'integer_in_range_property': self.integer_in_range_property,
            'boolean_property': self.boolean_property,
            'number_radio_choice': self.number_radio_choice,
            'numbers_group': self.numbers_group,
            'numbers_check_group': sorted(self.numbers_check_group),
            'site_selection': list(self.site_selection),
            'url_property': self.url_property.geturl() if self.url_property else None,
            'phone_number_us': str(self.phone_number_us) if self.phone_number_us else None,
            'lines': [line.text for line in self.lines],
        }

    @classmethod
    def from_dict(cls, data):
        """Rebuild a model from to_dict() output"""
        model = cls()
        model.string_property = data['string_property']
        model.integer_property = data['integer_property']
        model.double_property = data['double_property']
        date_value = data.get('date_property')
        model.date_property = date.fromisoformat(date_value) if date_value else None
        model.integer_in_range_property = data['integer_in_range_property']
        model.boolean_property = data['boolean_property']
        model.number_radio_choice = data['number_radio_choice']
        model.numbers_group = data.get('numbers_group')
        model.numbers_check_group = data.get('numbers_check_group', [])
        model.site_selection = list(data.get('site_selection', []))
        url = data.get('url_property')
        model.url_property = urlsplit(url) if url else None
        phone = data.get('phone_number_us')
        model.phone_number_us = UsPhoneNumber(phone) if phone else None
        model.lines = [Line(text) for text in data.get('lines', [])]
        return model
