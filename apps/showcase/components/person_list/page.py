"""
Person list page rendered as plain XML
"""
from flask import Response, render_template

from .. import register_component


@register_component('person_list')
class PersonListPage:
    """Renders one <person> element per person"""

    title = 'XML page'
    endpoint = 'person_list.persons_xml'
    description = 'Look ma, you can use plain XML too: a list of persons rendered from an XML template.'

    markup_type = 'xml'
    template = 'persons.xml'

    def __init__(self, persons):
        self.persons = persons

    def get_mimetype(self):
        return f'text/{self.markup_type}'

    def render(self):
        body = render_template(self.template, persons=self.persons)
        return Response(body, mimetype=self.get_mimetype())
