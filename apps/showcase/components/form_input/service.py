"""
Form Input Service
Keeps the form model in the user's session and applies submissions to it
"""
import logging

from flask import session
from wtforms import FieldList, FormField

from ...core.i18n import locale_display_name, supported_locales
from .forms import InputForm, LocaleForm
from .models import FormInputModel

logger = logging.getLogger(__name__)


class FormInputService:
    """Service for the Form Input component"""

    SESSION_KEY = 'form_input_model'

    def load_model(self):
        """Get the session's model, or a fresh one"""
        data = session.get(self.SESSION_KEY)
        if not data:
            return FormInputModel()
        try:
            return FormInputModel.from_dict(data)
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Discarding unreadable form model in session: {e}")
            session.pop(self.SESSION_KEY, None)
            return FormInputModel()

    def save_model(self, model):
        session[self.SESSION_KEY] = model.to_dict()

    def create_input_form(self, model):
        return InputForm(obj=model)

    def create_locale_form(self, page):
        form = LocaleForm(obj=page, prefix='locale')
        form.locale.choices = [(code, locale_display_name(code)) for code in supported_locales()]
        return form

    def submit(self, form, model):
        """Validate the form and, on success, write it back into the model

        Returns True when the model was updated and saved.
        """
        if not form.validate_on_submit():
            logger.debug(f"Form input rejected: {form.errors}")
            return False
        form.populate_obj(model)
        self.save_model(model)
        logger.info(f"Saved model {model}")
        return True

    def feedback_messages(self, form):
        """Field errors as '<label>: <message>' lines, in form order"""
        messages = []
        for field in form:
            messages.extend(self._field_messages(field))
        return messages

    def _field_messages(self, field):
        if isinstance(field, FieldList):
            for entry in field:
                yield from self._field_messages(entry)
        elif isinstance(field, FormField):
            for subfield in field:
                yield from self._field_messages(subfield)
        else:
            for error in field.errors:
                yield f'{field.label.text}: {error}'
