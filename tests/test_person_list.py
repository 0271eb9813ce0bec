"""Tests for the XML person list page."""

import xml.etree.ElementTree as ET

from showcase.components.person_list import Person, PersonService


class TestPersonService:

    def test_persons_are_immutable_records(self):
        persons = PersonService().get_persons()
        assert persons[0] == Person('Karen', 'Johnson')
        assert len(persons) == len(PersonService.PERSONS)


class TestXmlPage:

    def test_renders_xml_markup_type(self, client):
        response = client.get('/persons.xml')
        assert response.status_code == 200
        assert response.mimetype == 'text/xml'

    def test_one_element_per_person(self, client):
        response = client.get('/persons.xml')
        root = ET.fromstring(response.data)

        assert root.tag == 'persons'
        rows = [(p.findtext('firstName'), p.findtext('lastName')) for p in root.findall('person')]
        expected = [(p.name, p.last_name) for p in PersonService().get_persons()]
        assert rows == expected

    def test_values_are_escaped(self, client):
        response = client.get('/persons.xml')
        assert b"O'Neill" not in response.data
        root = ET.fromstring(response.data)
        assert "O'Neill" in [p.findtext('lastName') for p in root.findall('person')]
