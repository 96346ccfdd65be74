"""
Demo content: three forms and three responses, as shown on a fresh dashboard.
"""
from datetime import datetime, UTC

from .datadef import FieldOption, FieldType, Form, FormField, FormResponse, FormSettings, FormStatus
from .element import make_answer


def _day(year, month, day):
    return datetime(year, month, day, tzinfo=UTC)


def sample_forms():
    satisfaction = (
        FieldOption(id="o1", label="Very Satisfied", value="very_satisfied"),
        FieldOption(id="o2", label="Satisfied", value="satisfied"),
        FieldOption(id="o3", label="Neutral", value="neutral"),
        FieldOption(id="o4", label="Dissatisfied", value="dissatisfied"),
    )

    return (
        Form(
            id="1",
            title="Customer Feedback Survey",
            description="Help us improve our services",
            status=FormStatus.ACTIVE,
            fields=(
                FormField(id="f1", type=FieldType.FIRST_NAME, label="First Name", required=True),
                FormField(id="f2", type=FieldType.LAST_NAME, label="Last Name", required=True),
                FormField(id="f3", type=FieldType.EMAIL, label="Email Address", required=True),
                FormField(id="f4", type=FieldType.RADIO, label="How satisfied are you?", required=True,
                          options=satisfaction),
                FormField(id="f5", type=FieldType.TEXTAREA, label="Additional Comments"),
            ),
            settings=FormSettings(email_notifications=True, thank_you_message="Thank you for your feedback!"),
            created_by="1",
            created_at=_day(2024, 1, 15),
            updated_at=_day(2024, 1, 15),
        ),
        Form(
            id="2",
            title="Event Registration",
            description="Register for our upcoming workshop",
            status=FormStatus.ACTIVE,
            fields=(
                FormField(id="f1", type=FieldType.FIRST_NAME, label="First Name", required=True),
                FormField(id="f2", type=FieldType.EMAIL, label="Email", required=True),
                FormField(id="f3", type=FieldType.PHONE, label="Phone Number"),
            ),
            settings=FormSettings(email_notifications=True, thank_you_message="You are registered!"),
            created_by="1",
            created_at=_day(2024, 1, 20),
            updated_at=_day(2024, 1, 20),
        ),
        Form(
            id="3",
            title="Job Application",
            description="Apply for a position at our company",
            status=FormStatus.INACTIVE,
            settings=FormSettings(email_notifications=True, thank_you_message="Thank you for applying!"),
            created_by="1",
            created_at=_day(2024, 1, 10),
            updated_at=_day(2024, 1, 10),
        ),
    )


SAMPLE_ANSWERS = (
    ("r1", "1", {"f1": "John", "f2": "Doe", "f3": "john@example.com", "f4": "satisfied", "f5": "Great service!"}, _day(2024, 1, 16)),
    ("r2", "1", {"f1": "Jane", "f2": "Smith", "f3": "jane@example.com", "f4": "very_satisfied", "f5": ""}, _day(2024, 1, 17)),
    ("r3", "2", {"f1": "Bob", "f2": "bob@example.com", "f3": "+1234567890"}, _day(2024, 1, 21)),
)


def sample_responses(forms):
    by_id = {form.id: form for form in forms}
    for response_id, form_id, raw_answers, submitted_at in SAMPLE_ANSWERS:
        form = by_id[form_id]
        yield FormResponse(
            id=response_id,
            form_id=form_id,
            answers={
                field_id: make_answer(form.get_field(field_id), value)
                for field_id, value in raw_answers.items()
            },
            submitted_at=submitted_at,
        )
