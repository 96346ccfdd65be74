from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from formcraft.data import UUID_GENR
from formcraft.helper import timestamp

from .datadef import DashboardStats, Form, FormResponse, FormSettings, FormStatus
from .exceptions import (
    FormNotFoundError,
    FormTitleRequiredError,
    FormUnavailableError,
    InvalidFieldError,
)
from . import config, logger


IMMUTABLE_ATTRIBUTES = frozenset(("id", "created_at", "created_by", "updated_at"))


def default_settings() -> FormSettings:
    return FormSettings(
        email_notifications=config.DEFAULT_EMAIL_NOTIFICATIONS,
        thank_you_message=config.DEFAULT_THANK_YOU_MESSAGE,
    )


class FormStore(object):
    """
    Owner of every Form and FormResponse of a session.

    The store is the only mutation surface: forms are immutable values and
    each operation replaces the stored value with an updated copy.
    """

    def __init__(self, forms: Iterable[Form] = (), responses: Iterable[FormResponse] = ()):
        self._forms: Dict[str, Form] = {}
        self._responses: List[FormResponse] = []

        for form in forms:
            self._forms[form.id] = form

        self._responses.extend(responses)

    def __contains__(self, form_id):
        return form_id in self._forms

    def __len__(self):
        return len(self._forms)

    @property
    def stats(self) -> DashboardStats:
        forms = self._forms.values()
        active = sum(1 for form in forms if form.status == FormStatus.ACTIVE)
        return DashboardStats(
            total_forms=len(forms),
            active_forms=active,
            inactive_forms=len(forms) - active,
            total_responses=len(self._responses),
        )

    def get_form(self, form_id) -> Optional[Form]:
        return self._forms.get(form_id)

    def fetch_form(self, form_id) -> Form:
        try:
            return self._forms[form_id]
        except KeyError:
            raise FormNotFoundError(form_id)

    def list_forms(self) -> Tuple[Form, ...]:
        return tuple(self._forms.values())

    def list_responses(self, form_id=None) -> Tuple[FormResponse, ...]:
        if form_id is None:
            return tuple(self._responses)

        return tuple(resp for resp in self._responses if resp.form_id == form_id)

    def create_form(self, title: str, description: Optional[str] = None, created_by: Optional[str] = None) -> Form:
        if not title or not title.strip():
            raise FormTitleRequiredError()

        now = timestamp()
        form = Form(
            id=str(UUID_GENR()),
            title=title.strip(),
            description=description or None,
            status=FormStatus.INACTIVE,
            fields=(),
            settings=default_settings(),
            created_by=created_by or config.DEFAULT_CREATED_BY,
            created_at=now,
            updated_at=now,
        )
        self._forms[form.id] = form
        logger.info("Form created [%s] %r", form.id, form.title)
        return form

    def update_form(self, form_id, **changes) -> Form:
        form = self.fetch_form(form_id)

        locked = IMMUTABLE_ATTRIBUTES.intersection(changes)
        if locked:
            raise InvalidFieldError(
                "F00.101",
                f"Attributes cannot be updated: {sorted(locked)}",
                {"form_id": form_id},
            )

        if "title" in changes:
            title = (changes["title"] or "").strip()
            if not title:
                raise FormTitleRequiredError()
            changes["title"] = title

        try:
            updated = form.merge(**changes, updated_at=timestamp())
        except ValueError as e:
            raise InvalidFieldError("F00.102", f"Invalid form update: {e}", {"form_id": form_id})

        self._forms[form_id] = updated
        logger.info("Form updated [%s] %s", form_id, sorted(changes))
        return updated

    def delete_form(self, form_id) -> Form:
        form = self.fetch_form(form_id)
        del self._forms[form_id]

        if config.CASCADE_DELETE_RESPONSES:
            before = len(self._responses)
            self._responses = [resp for resp in self._responses if resp.form_id != form_id]
            logger.info("Form deleted [%s] with %d response(s)", form_id, before - len(self._responses))
        else:
            logger.info("Form deleted [%s], responses retained", form_id)

        return form

    def toggle_form_status(self, form_id) -> Form:
        form = self.fetch_form(form_id)
        status = FormStatus.INACTIVE if form.is_active else FormStatus.ACTIVE
        return self.update_form(form_id, status=status)

    def submit_response(self, form_id, answers: Mapping, files: Optional[Iterable[str]] = None) -> FormResponse:
        ''' Record one finalized response. Answers are stored as given, their
            validation against the form fields happens before this call.
        '''
        form = self.fetch_form(form_id)
        if not form.is_active:
            raise FormUnavailableError(form_id)

        try:
            response = FormResponse(
                id=str(UUID_GENR()),
                form_id=form_id,
                answers=dict(answers),
                files=tuple(files) if files else None,
                submitted_at=timestamp(),
            )
        except ValueError as e:
            raise InvalidFieldError("F00.103", f"Invalid response answers: {e}", {"form_id": form_id})

        self._responses.append(response)
        logger.info("Response submitted [%s] for form [%s]", response.id, form_id)
        return response

    def load_samples(self) -> "FormStore":
        from .samples import sample_forms, sample_responses

        forms = sample_forms()
        for form in forms:
            self._forms[form.id] = form

        self._responses.extend(sample_responses(forms))
        logger.info("Loaded %d sample form(s)", len(forms))
        return self
