import pytest

from formcraft.form import FieldType, FormStatus, FormStore, make_answer
from formcraft.form import config
from formcraft.form.exceptions import (
    FormNotFoundError,
    FormTitleRequiredError,
    FormUnavailableError,
    InvalidFieldError,
)


def test_create_form_defaults(store):
    form = store.create_form("Contact Us")

    assert form.status == FormStatus.INACTIVE
    assert form.fields == ()
    assert form.total_pages == 1
    assert form.description is None
    assert form.settings.thank_you_message == config.DEFAULT_THANK_YOU_MESSAGE
    assert form.settings.email_notifications is False
    assert form.created_by == config.DEFAULT_CREATED_BY
    assert form.created_at == form.updated_at
    assert store.get_form(form.id) is form


@pytest.mark.parametrize("title", ["", "   ", None])
def test_create_form_requires_title(store, title):
    with pytest.raises(FormTitleRequiredError):
        store.create_form(title)

    assert store.list_forms() == ()


def test_update_form_merges_and_bumps_timestamp(store):
    form = store.create_form("Contact Us", "Say hello", created_by="42")
    updated = store.update_form(form.id, title="Contact", description=None)

    assert updated.title == "Contact"
    assert updated.description is None
    assert updated.created_by == "42"
    assert updated.updated_at >= form.updated_at
    assert store.get_form(form.id) == updated


def test_update_form_rejects_bad_changes(store):
    form = store.create_form("Contact Us")

    with pytest.raises(InvalidFieldError):
        store.update_form(form.id, id="other")

    with pytest.raises(InvalidFieldError):
        store.update_form(form.id, colour="blue")

    with pytest.raises(InvalidFieldError):
        store.update_form(form.id, status="archived")

    with pytest.raises(FormTitleRequiredError):
        store.update_form(form.id, title=" ")

    assert store.get_form(form.id) is form


def test_update_form_strips_title(store):
    form = store.create_form("Survey")

    assert store.update_form(form.id, title="  Contact  ").title == "Contact"


def test_update_form_settings(store):
    form = store.create_form("Contact Us")
    updated = store.update_form(form.id, settings={
        "email_notifications": True,
        "thank_you_message": "Cheers!",
        "expiration_date": "2030-01-31",
    })

    assert updated.settings.email_notifications is True
    assert updated.settings.thank_you_message == "Cheers!"
    assert updated.settings.expiration_date.isoformat() == "2030-01-31"


def test_unknown_form_is_not_found(store):
    assert store.get_form("missing") is None

    for operation in (store.fetch_form, store.delete_form, store.toggle_form_status):
        with pytest.raises(FormNotFoundError):
            operation("missing")

    with pytest.raises(FormNotFoundError):
        store.update_form("missing", title="x")


def test_toggle_status_twice_restores(store):
    form = store.create_form("Contact Us")

    assert store.toggle_form_status(form.id).status == FormStatus.ACTIVE
    assert store.toggle_form_status(form.id).status == FormStatus.INACTIVE


def test_stats_follow_store_contents(sample_store):
    stats = sample_store.stats
    assert (stats.total_forms, stats.active_forms, stats.inactive_forms, stats.total_responses) == (3, 2, 1, 3)

    sample_store.toggle_form_status("3")
    sample_store.create_form("Fresh")
    stats = sample_store.stats
    assert (stats.total_forms, stats.active_forms, stats.inactive_forms) == (4, 3, 1)


def test_submit_response(sample_store):
    form = sample_store.fetch_form("2")
    answers = {"f1": make_answer(form.get_field("f1"), "Ann")}

    response = sample_store.submit_response("2", answers, files=["cv.pdf"])

    assert response.form_id == "2"
    assert response.answers["f1"].value == "Ann"
    assert response.files == ("cv.pdf",)
    assert response in sample_store.list_responses("2")
    assert sample_store.stats.total_responses == 4


def test_submit_response_rejects_inactive_form(sample_store):
    with pytest.raises(FormUnavailableError):
        sample_store.submit_response("3", {})

    with pytest.raises(FormNotFoundError):
        sample_store.submit_response("missing", {})

    assert sample_store.stats.total_responses == 3


def test_submit_response_does_not_check_fields(sample_store):
    response = sample_store.submit_response("2", {"unknown": {"kind": "text", "value": "x"}})
    assert response.answers["unknown"].render() == "x"


def test_delete_form_cascades_responses(sample_store):
    sample_store.delete_form("1")

    assert sample_store.get_form("1") is None
    assert sample_store.list_responses("1") == ()
    assert sample_store.stats.total_responses == 1


def test_delete_form_can_retain_responses(sample_store, monkeypatch):
    monkeypatch.setitem(config.__values__, "CASCADE_DELETE_RESPONSES", False)

    sample_store.delete_form("1")

    assert len(sample_store.list_responses("1")) == 2
    assert sample_store.stats.total_forms == 2


def test_samples_are_consistent():
    store = FormStore().load_samples()
    feedback = store.fetch_form("1")

    assert [f.type for f in feedback.fields] == [
        FieldType.FIRST_NAME, FieldType.LAST_NAME, FieldType.EMAIL, FieldType.RADIO, FieldType.TEXTAREA,
    ]
    for response in store.list_responses():
        form = store.fetch_form(response.form_id)
        assert all(form.get_field(field_id) for field_id in response.answers)
