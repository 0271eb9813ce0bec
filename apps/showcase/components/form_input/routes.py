"""
Form Input Routes
"""
import logging

from flask import Blueprint, flash, redirect, url_for

from ...core.i18n import request_locale, set_session_locale
from .page import FormInputPage
from .service import FormInputService

logger = logging.getLogger(__name__)

# Create blueprint with templates and static files
form_input_bp = Blueprint(
    'form_input',
    __name__,
    template_folder='templates',
    static_folder='static',
    static_url_path='/form_input/static'
)

# Service instance
service = FormInputService()

@form_input_bp.route('/forminput', methods=['GET', 'POST'])
def form_input():
    """Show the input form, or apply a submission to the session model"""
    page = FormInputPage()
    model = service.load_model()
    form = service.create_input_form(model)

    if service.submit(form, model):
        # Form validation successful, show the edited model
        flash(f"Saved model {model}", 'info')
        return redirect(url_for('form_input.form_input'))

    return page.render(form, service.create_locale_form(page),
                       feedback=service.feedback_messages(form))

@form_input_bp.route('/forminput/reset')
def reset_form():
    """Throw away any invalid input and show the stored model again"""
    logger.debug("Form input reset")
    return redirect(url_for('form_input.form_input'))

@form_input_bp.route('/forminput/locale', methods=['POST'])
def select_locale():
    """Locale drop-down round trip"""
    page = FormInputPage()
    form = service.create_locale_form(page)
    if form.validate_on_submit():
        # the page's locale property writes the session locale
        form.populate_obj(page)
    else:
        logger.debug(f"Locale selection rejected: {form.errors}")
    return redirect(url_for('form_input.form_input'))

@form_input_bp.route('/forminput/locale/default')
def default_locale():
    """Return to the locale the browser asks for"""
    set_session_locale(request_locale())
    return redirect(url_for('form_input.form_input'))

def init_form_input(app):
    """Initialize form input component with Flask app"""
    app.register_blueprint(form_input_bp)
    return form_input_bp
