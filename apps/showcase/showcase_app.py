"""
Component Showcase
Flask application hosting the example pages
"""
import logging

from flask import Flask
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

from .config.settings import ShowcaseConfig
from .core.i18n import init_i18n
from .core.logging_config import init_logging
from .routes.main_routes import main_bp

# Import Person List component
from .components.person_list import init_person_list

# Import Form Input component
from .components.form_input import init_form_input

logger = logging.getLogger(__name__)

class ShowcaseApp:
    """Main showcase application class"""

    def __init__(self):
        self.app = None
        self.limiter = None

    def create_app(self, config_overrides=None):
        """Create and configure Flask application"""
        self.app = Flask(__name__)

        # Load configuration
        self.app.config.from_object(ShowcaseConfig)
        if config_overrides:
            self.app.config.update(config_overrides)

        init_logging(self.app.config['LOG_LEVEL'])

        # Initialize extensions
        self.limiter = Limiter(
            key_func=get_remote_address,
            app=self.app,
            default_limits=[self.app.config['RATELIMIT_DEFAULT']],
            storage_uri=self.app.config['RATELIMIT_STORAGE_URI']
        )
        init_i18n(self.app)

        # Initialize components
        init_person_list(self.app)
        init_form_input(self.app)

        # Register main blueprint
        self.app.register_blueprint(main_bp)

        return self.app

    def run(self):
        """Start the showcase application"""
        host = self.app.config['HOST']
        port = self.app.config['PORT']

        logger.info("=" * 60)
        logger.info(self.app.config['SITE_TITLE'])
        logger.info(f"Starting on: http://{host}:{port}")
        logger.info("Pages:")
        logger.info(f"   - Index:       http://{host}:{port}/")
        logger.info(f"   - XML page:    http://{host}:{port}/persons.xml")
        logger.info(f"   - Form input:  http://{host}:{port}/forminput")
        logger.info("=" * 60)

        # Run the application
        self.app.run(host=host, port=port, debug=False)

def create_app(config_overrides=None):
    """Application factory"""
    return ShowcaseApp().create_app(config_overrides)

def main():
    """Main entry point"""
    showcase = ShowcaseApp()
    showcase.create_app()
    showcase.run()
