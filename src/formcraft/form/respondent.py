from enum import StrEnum
from typing import Any, Dict, Optional, Tuple

from formcraft.error import FormcraftException

from .answer import BaseAnswer, FilesAnswer
from .datadef import Form, FormField, FormResponse
from .element import make_answer
from .exceptions import FieldNotFoundError, FormNotFoundError, FormUnavailableError
from .store import FormStore
from .validation import validate_fields
from . import config, logger


class FlowState(StrEnum):
    FILLING = "filling"
    SUBMITTING = "submitting"
    SUBMITTED = "submitted"


class RespondentFlow(object):
    """
    Drive one respondent through a published form, page by page.

    Answers accumulate across pages and reach the store exactly once, when
    the last page validates. Use `RespondentFlow.open` so that unknown and
    inactive forms are turned away before any state exists.
    """

    def __init__(self, store: FormStore, form: Form):
        self.store = store
        self.form = form
        self.state = FlowState.FILLING
        self.current_page = 1
        self.answers: Dict[str, BaseAnswer] = {}
        self.errors: Dict[str, str] = {}
        self.response: Optional[FormResponse] = None
        self.failure: Optional[str] = None

    @classmethod
    def open(cls, store: FormStore, form_id) -> "RespondentFlow":
        form = store.get_form(form_id)
        if form is None:
            raise FormNotFoundError(form_id)

        if not form.is_active:
            raise FormUnavailableError(form_id)

        return cls(store, form)

    @property
    def total_pages(self) -> int:
        return self.form.total_pages

    @property
    def current_fields(self) -> Tuple[FormField, ...]:
        return self.form.fields_on_page(self.current_page)

    @property
    def is_last_page(self) -> bool:
        return self.current_page >= self.total_pages

    @property
    def is_submitted(self) -> bool:
        return self.state == FlowState.SUBMITTED

    @property
    def progress(self) -> float:
        ''' Percentage of pages already completed. '''
        return (self.current_page - 1) / self.total_pages * 100

    @property
    def thank_you_message(self) -> str:
        return self.form.settings.thank_you_message

    def get_answer(self, field_id) -> Optional[BaseAnswer]:
        return self.answers.get(field_id)

    def set_answer(self, field_id, value: Any) -> Optional[BaseAnswer]:
        if self.state != FlowState.FILLING:
            return None

        field = self.form.get_field(field_id)
        if field is None:
            raise FieldNotFoundError(field_id)

        answer = make_answer(field, value)
        self.answers[field_id] = answer
        self.errors.pop(field_id, None)
        return answer

    def validate_page(self) -> bool:
        self.errors = validate_fields(self.current_fields, self.answers)
        return not self.errors

    def next(self) -> bool:
        ''' Advance one page, or submit on the last page. Returns whether
            the flow moved forward.
        '''
        if self.state != FlowState.FILLING:
            return False

        if not self.validate_page():
            logger.debug("Page %d of form [%s] has %d error(s)", self.current_page, self.form.id, len(self.errors))
            return False

        if not self.is_last_page:
            self.current_page += 1
            return True

        return self._submit()

    def previous(self) -> bool:
        if self.state != FlowState.FILLING or self.current_page <= 1:
            return False

        self.current_page -= 1
        return True

    def _file_names(self) -> Tuple[str, ...]:
        names = ()
        for answer in self.answers.values():
            if isinstance(answer, FilesAnswer):
                names += answer.names

        return names

    def _submit(self) -> bool:
        self.state = FlowState.SUBMITTING
        self.failure = None

        try:
            self.response = self.store.submit_response(
                self.form.id,
                dict(self.answers),
                files=self._file_names() or None,
            )
        except FormcraftException as e:
            logger.warning("Submission of form [%s] failed: %s", self.form.id, e)
            self.state = FlowState.FILLING
            self.failure = config.SUBMISSION_FAILED_MESSAGE
            return False

        self.state = FlowState.SUBMITTED
        return True
