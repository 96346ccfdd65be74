import pytest

from formcraft.form import BuilderSession, FieldType, FormField, FormStore


@pytest.fixture
def store():
    return FormStore()


@pytest.fixture
def sample_store():
    return FormStore().load_samples()


@pytest.fixture
def builder(store):
    session = BuilderSession(store)
    session.title = "Contact Us"
    session.ensure_form()
    return session


def make_field(field_id, page_number=1, field_type=FieldType.TEXT, **kwargs):
    kwargs.setdefault("label", field_id.title())
    return FormField(id=field_id, type=field_type, page_number=page_number, **kwargs)


@pytest.fixture
def field_factory():
    return make_field
