"""
Showcase configuration settings
"""
import os
from datetime import timedelta

class ShowcaseConfig:
    """Centralized configuration for the showcase application"""

    # Flask settings
    SECRET_KEY = os.environ.get('SECRET_KEY', 'your-secret-key-here-change-in-production')
    PERMANENT_SESSION_LIFETIME = timedelta(hours=8)

    # Server settings
    HOST = os.environ.get('SHOWCASE_HOST', '0.0.0.0')
    PORT = int(os.environ.get('SHOWCASE_PORT', 8080))

    # Logging
    LOG_LEVEL = os.environ.get('SHOWCASE_LOG_LEVEL', 'INFO')

    # Security settings
    WTF_CSRF_ENABLED = True
    WTF_CSRF_TIME_LIMIT = None

    # Rate limiting
    RATELIMIT_ENABLED = True
    RATELIMIT_STORAGE_URI = "memory://"
    RATELIMIT_DEFAULT = "100 per minute"

    # Internationalisation
    BABEL_DEFAULT_LOCALE = os.environ.get('SHOWCASE_DEFAULT_LOCALE', 'en')
    BABEL_DEFAULT_TIMEZONE = 'UTC'

    # Locales offered by the locale selector, in display order
    SUPPORTED_LOCALES = ['en', 'nl', 'de', 'zh_CN', 'ja', 'pt_BR']

    # Site title shown in the page header
    SITE_TITLE = 'Component Showcase'

    @classmethod
    def get_supported_locales(cls):
        """Get the supported locale identifiers"""
        return list(cls.SUPPORTED_LOCALES)
