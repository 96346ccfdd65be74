from datetime import date

import pytest

from formcraft.form import (
    AnswerKind,
    FieldType,
    FormField,
    FormResponse,
    get_field_type,
    make_answer,
    palette,
    render_answer,
)
from formcraft.form.answer import ChoiceAnswer, TextAnswer
from formcraft.form.element import FieldCategory
from formcraft.form.exceptions import InvalidFieldError


def test_every_field_type_is_registered():
    for field_type in FieldType:
        assert get_field_type(field_type).type_key == field_type


def test_palette_order():
    assert [entry.type_key for entry in palette(FieldCategory.BASIC)] == [
        "first_name", "last_name", "email", "phone", "text", "textarea",
    ]
    assert [entry.type_name for entry in palette(FieldCategory.ADVANCED)] == [
        "Dropdown", "Radio Buttons", "Checkboxes", "Date Picker", "File Upload", "Number", "Password",
    ]
    assert len(palette()) == len(FieldType)


@pytest.mark.parametrize("field_type,kind", [
    (FieldType.TEXT, AnswerKind.TEXT),
    (FieldType.EMAIL, AnswerKind.TEXT),
    (FieldType.TEXTAREA, AnswerKind.LONG_TEXT),
    (FieldType.RADIO, AnswerKind.CHOICE),
    (FieldType.CHECKBOX, AnswerKind.MULTI_CHOICE),
    (FieldType.DATE, AnswerKind.DATE),
    (FieldType.NUMBER, AnswerKind.NUMBER),
    (FieldType.FILE, AnswerKind.FILES),
])
def test_answer_kind_per_field_type(field_type, kind):
    assert get_field_type(field_type).answer_kind() == kind


def choice_field(field_type=FieldType.CHECKBOX):
    return get_field_type(field_type).build_field("colors")


def test_choice_answers_must_match_options():
    field = choice_field()

    answer = make_answer(field, ["option1", "option2"])
    assert answer.render() == "option1, option2"
    assert make_answer(field, "option2").values == ("option2",)
    assert make_answer(field, None).is_empty()

    with pytest.raises(InvalidFieldError):
        make_answer(field, ["option9"])

    radio = choice_field(FieldType.RADIO)
    assert make_answer(radio, "option1") == ChoiceAnswer(value="option1")
    assert make_answer(radio, "").is_empty()


def test_date_and_number_answers():
    day = FormField(id="d", type=FieldType.DATE, label="Day")
    assert make_answer(day, "2024-01-15").value == date(2024, 1, 15)
    assert make_answer(day, date(2024, 2, 1)).render() == "2024-02-01"
    assert make_answer(day, "").is_empty()

    with pytest.raises(InvalidFieldError):
        make_answer(day, "someday")

    number = FormField(id="n", type=FieldType.NUMBER, label="N")
    assert make_answer(number, "42").value == 42
    assert make_answer(number, "2.5").render() == "2.5"
    assert not make_answer(number, 0).is_empty()

    with pytest.raises(InvalidFieldError):
        make_answer(number, True)


@pytest.mark.parametrize("raw", ["nan", "inf", "-Infinity", float("nan")])
def test_number_answers_must_be_finite(raw):
    number = FormField(id="n", type=FieldType.NUMBER, label="N")

    with pytest.raises(InvalidFieldError):
        make_answer(number, raw)


def test_answer_instances_must_fit_the_field():
    text = FormField(id="t", type=FieldType.TEXT, label="T")
    answer = TextAnswer(value="hi")

    assert make_answer(text, answer) is answer

    with pytest.raises(InvalidFieldError):
        make_answer(text, ChoiceAnswer(value="x"))

    with pytest.raises(InvalidFieldError):
        make_answer(text, ["a", "b"])


def test_response_answers_round_trip_through_dicts():
    response = FormResponse.model_validate({
        "id": "r",
        "form_id": "f",
        "answers": {
            "a": {"kind": "multi_choice", "values": ["x", "y"]},
            "b": {"kind": "number", "value": 3},
        },
        "submitted_at": "2024-01-16T00:00:00Z",
    })

    assert render_answer(response.get_answer("a")) == "x, y"
    assert render_answer(response.get_answer("b")) == "3"
    assert render_answer(response.get_answer("missing")) == ""


def test_field_invariants():
    with pytest.raises(ValueError):
        FormField(id="f", type=FieldType.TEXT, label="F", page_number=0)

    with pytest.raises(ValueError):
        FormField(id="f", type=FieldType.RADIO, label="F", options=[
            {"id": "o", "label": "A", "value": "a"},
            {"id": "o", "label": "B", "value": "b"},
        ])
