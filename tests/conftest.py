import pytest

from showcase import create_app


@pytest.fixture
def app():
    app = create_app({
        'TESTING': True,
        'SECRET_KEY': 'test-secret',
        'WTF_CSRF_ENABLED': False,
        'RATELIMIT_ENABLED': False,
    })
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def valid_form_data():
    """Form post that passes every validator in any locale"""
    return {
        'string_property': 'hello',
        'integer_property': '42',
        'double_property': '3',
        'date_property': '2026-10-19',
        'integer_in_range_property': '75',
        'boolean_property': 'y',
        'number_radio_choice': '2',
        'numbers_group': '3',
        'numbers_check_group': ['1', '3'],
        'site_selection': ['Java.Net'],
        'url_property': 'https://example.org/docs',
        'phone_number_us': '(555) 123-4567',
        'lines-0-text': 'first',
        'lines-1-text': 'second',
        'lines-2-text': 'third',
    }
