"""
Main page routes for the showcase
"""
import logging

from flask import Blueprint, render_template
from werkzeug.exceptions import InternalServerError

from ..components import registry

logger = logging.getLogger(__name__)

# Create main blueprint
main_bp = Blueprint('main', __name__)

@main_bp.route('/')
def index():
    """List the example pages"""
    return render_template('index.html', examples=registry.entries())

@main_bp.app_errorhandler(404)
def not_found(error):
    logger.warning(f"Not found: {error.description}")
    return render_template('error.html', code=error.code, name=error.name,
                           description=error.description), 404

@main_bp.app_errorhandler(InternalServerError)
def internal_error(error):
    original = getattr(error, 'original_exception', None)
    logger.error(f"Unhandled error: {original or error}", exc_info=original)
    return render_template('error.html', code=500, name=InternalServerError.name,
                           description=InternalServerError.description), 500
