"""
Person List Routes
"""
import logging

from flask import Blueprint

from .page import PersonListPage
from .service import PersonService

logger = logging.getLogger(__name__)

# Create blueprint for the person list
person_list_bp = Blueprint(
    'person_list',
    __name__,
    template_folder='templates'
)

# Initialize service
service = PersonService()

@person_list_bp.route('/persons.xml')
def persons_xml():
    """Render the persons as XML"""
    persons = service.get_persons()
    logger.debug(f"Rendering {len(persons)} persons")
    return PersonListPage(persons).render()

def init_person_list(app):
    """Initialize person list component with Flask app"""
    app.register_blueprint(person_list_bp)
    return person_list_bp
