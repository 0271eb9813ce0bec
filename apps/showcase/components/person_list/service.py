"""
Person List Service
Example data source for the person list page
"""

from .models import Person


class PersonService:
    """Service for the Person List component"""

    PERSONS = (
        ('Karen', 'Johnson'),
        ('Bob', 'Carlson'),
        ('Kathy', 'Washington'),
        ('Marlon', 'Ulster'),
        ('Erin', "O'Neill"),
    )

    def get_persons(self):
        """Get the example persons, in display order"""
        return [Person(name, last_name) for name, last_name in self.PERSONS]
