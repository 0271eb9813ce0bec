"""
Form input demonstration page
"""
from flask import render_template

from .. import register_component
from ...core.i18n import current_locale, set_session_locale
from .models import NUMBERS, SITES


@register_component('form_input')
class FormInputPage:
    """Page wrapping the input form, the locale selector and the feedback panel"""

    title = 'Form input'
    endpoint = 'form_input.form_input'
    description = ('Text fields, a date picker, radio and check groups, multiple choice, '
                   'custom converters and locale switching.')

    template = 'form_input.html'

    @property
    def locale(self):
        """The locale of the current request"""
        return current_locale()

    @locale.setter
    def locale(self, locale):
        # bound to the locale drop-down, so selecting a locale updates the session
        set_session_locale(locale)

    def render(self, input_form, locale_form, feedback=(), status=200):
        return render_template(
            self.template,
            page=self,
            form=input_form,
            locale_form=locale_form,
            feedback=list(feedback),
            numbers=NUMBERS,
            sites=SITES,
        ), status
