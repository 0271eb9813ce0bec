"""
Locale handling for the showcase pages

The session locale wins when it is one of the supported locales, otherwise
the best Accept-Language match is used.
"""
import logging

from babel import Locale, UnknownLocaleError
from flask import current_app, request, session
from flask_babel import Babel, get_locale, refresh

logger = logging.getLogger(__name__)

SESSION_LOCALE_KEY = 'locale'

babel = Babel()


def supported_locales():
    """Get the locale identifiers offered by the application"""
    return current_app.config['SUPPORTED_LOCALES']


def request_locale():
    """Best match for the request's Accept-Language header"""
    return (request.accept_languages.best_match(supported_locales())
            or current_app.config['BABEL_DEFAULT_LOCALE'])


def select_locale():
    """Locale selector registered with Flask-Babel"""
    locale = session.get(SESSION_LOCALE_KEY)
    if locale in supported_locales():
        return locale
    return request_locale()


def current_locale():
    """Supported identifier of the locale used for the current request

    Babel expands some identifiers (zh_CN becomes zh_Hans_CN), so the
    resolved locale is mapped back to the entry it was parsed from.
    """
    locale = get_locale()
    for code in supported_locales():
        if Locale.parse(code) == locale:
            return code
    return str(locale)


def html_lang():
    """Current locale as a BCP 47 language tag"""
    return current_locale().replace('_', '-')


def set_session_locale(locale):
    """Store the locale in the user's session

    None and unsupported locales are ignored.
    """
    if locale is None:
        return
    locale = str(locale)
    if locale not in supported_locales():
        logger.warning(f"Ignoring unsupported locale {locale!r}")
        return
    session[SESSION_LOCALE_KEY] = locale
    refresh()
    logger.debug(f"Session locale set to {locale}")


def locale_display_name(locale, in_locale=None):
    """Display name of locale, written in in_locale (default: current locale)"""
    if in_locale is None:
        in_locale = get_locale()
    try:
        name = Locale.parse(locale).get_display_name(in_locale)
    except (UnknownLocaleError, ValueError):
        return str(locale)
    return name or str(locale)


def init_i18n(app):
    """Initialize Flask-Babel with the session-aware locale selector"""
    babel.init_app(app, locale_selector=select_locale)

    @app.context_processor
    def inject_locale():
        return {'current_locale': current_locale, 'html_lang': html_lang}

    return babel
