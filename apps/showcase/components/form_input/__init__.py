"""
Form Input Component
Demonstrates binding a compound model to typed input widgets
"""
from .forms import InputForm, LineForm, LocaleForm
from .models import FormInputModel, Line, UsPhoneNumber, NUMBERS, SITES
from .page import FormInputPage
from .routes import form_input_bp, init_form_input
from .service import FormInputService

__all__ = [
    'InputForm',
    'LineForm',
    'LocaleForm',
    'FormInputModel',
    'Line',
    'UsPhoneNumber',
    'NUMBERS',
    'SITES',
    'FormInputPage',
    'FormInputService',
    'form_input_bp',
    'init_form_input',
]
