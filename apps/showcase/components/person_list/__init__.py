"""
Person List Component
Renders the example persons with an XML template instead of HTML
"""
from .models import Person
from .page import PersonListPage
from .routes import person_list_bp, init_person_list
from .service import PersonService

__all__ = ['Person', 'PersonListPage', 'PersonService', 'person_list_bp', 'init_person_list']
