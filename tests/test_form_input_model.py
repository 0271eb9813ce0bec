"""Tests for the form input model and its form bindings."""

from datetime import date

from werkzeug.datastructures import MultiDict

from showcase.components.form_input import FormInputModel, FormInputService, InputForm, Line


class TestFormInputModel:

    def test_defaults(self):
        model = FormInputModel()
        assert model.string_property == 'test'
        assert model.integer_property == 100
        assert model.double_property == 20.5
        assert model.date_property == date.today()
        assert model.integer_in_range_property == 50
        assert model.number_radio_choice == '1'
        assert model.numbers_group is None
        assert model.numbers_check_group == set()
        assert [line.text for line in model.lines] == ['line one', 'line two', 'line three']

    def test_check_group_is_kept_as_set(self):
        model = FormInputModel()
        model.numbers_check_group = ['3', '1', '3']
        assert model.numbers_check_group == {'1', '3'}

    def test_str_describes_every_property(self):
        text = str(FormInputModel())
        assert text.startswith("[FormInputModel string_property = 'test'")
        assert 'url_property = http://wicket.sourceforge.net' in text
        assert 'phone_number_us = (123) 456-1234' in text
        assert 'lines = [line one, line two, line three]' in text

    def test_session_representation(self):
        model = FormInputModel()
        model.date_property = date(2026, 1, 31)
        model.numbers_check_group = {'2'}
        model.lines = [Line('only')]

        restored = FormInputModel.from_dict(model.to_dict())
        assert restored.date_property == date(2026, 1, 31)
        assert restored.numbers_check_group == {'2'}
        assert restored.url_property == model.url_property
        assert restored.phone_number_us == model.phone_number_us
        assert [line.text for line in restored.lines] == ['only']

    def test_missing_optional_values(self):
        model = FormInputModel()
        model.date_property = None
        model.url_property = None
        model.phone_number_us = None

        restored = FormInputModel.from_dict(model.to_dict())
        assert restored.date_property is None
        assert restored.url_property is None
        assert restored.phone_number_us is None


class TestInputFormBinding:

    def test_lines_are_edited_in_place(self, app):
        model = FormInputModel()
        original = model.lines[0]
        formdata = MultiDict({'lines-0-text': 'changed', 'lines-1-text': 'b', 'lines-2-text': 'c'})

        with app.test_request_context('/forminput', method='POST'):
            form = InputForm(formdata=formdata, obj=model)
            form.lines.populate_obj(model, 'lines')

        assert model.lines[0] is original
        assert original.text == 'changed'

    def test_feedback_messages_use_labels(self, app):
        formdata = MultiDict({'string_property': '', 'integer_property': 'x'})

        with app.test_request_context('/forminput', method='POST'):
            form = InputForm(formdata=formdata, obj=FormInputModel())
            form.validate()
            messages = FormInputService().feedback_messages(form)

        assert 'String: This field is required.' in messages
        assert "Integer: 'x' is not a valid integer" in messages
