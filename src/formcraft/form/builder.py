from typing import Mapping, Optional, Tuple, Union

from formcraft.data import prefixed_identifier
from formcraft.helper import move_item, underscore_label

from .datadef import FieldOption, Form, FormField
from .element import get_field_type
from .exceptions import (
    FieldNotFoundError,
    FormTitleRequiredError,
    InvalidFieldError,
    NoCurrentFormError,
    PageNotEmptyError,
)
from .store import FormStore
from . import logger


class BuilderSession(object):
    """
    Editing session of a single form.

    The session keeps the identifier of the "current form" and resolves it
    through the store on every access, so changes made through the store are
    always visible and a deleted form simply drops out of the session.
    Pages are a session concern as well: a page added here carries no field
    until one is placed on it.
    """

    def __init__(self, store: FormStore, form_id=None, user=None):
        self.store = store
        self.user = user
        self.title = ""
        self.description = ""
        self.active_page = 1
        self.selected_field_id = None
        self._form_id = None
        self._page_count = 1

        if form_id is not None:
            self.open(form_id)

    # ------------------------------------------------------------------
    # Current form
    # ------------------------------------------------------------------

    @property
    def current_form(self) -> Optional[Form]:
        if self._form_id is None:
            return None

        form = self.store.get_form(self._form_id)
        if form is None:
            logger.info("Current form [%s] no longer exists", self._form_id)
            self._form_id = None
            self.selected_field_id = None
            self.active_page = 1
            self._page_count = 1

        return form

    def open(self, form_id) -> Form:
        form = self.store.fetch_form(form_id)
        self._form_id = form.id
        self.title = form.title
        self.description = form.description or ""
        self.active_page = 1
        self._page_count = form.total_pages
        self.selected_field_id = None
        return form

    def ensure_form(self) -> Form:
        ''' Current form, created from the draft title when there is none yet. '''
        form = self.current_form
        if form is not None:
            return form

        if not self.title.strip():
            raise FormTitleRequiredError()

        form = self.store.create_form(
            self.title,
            self.description or None,
            created_by=self.user.id if self.user else None,
        )
        self._form_id = form.id
        return form

    def save(self) -> Form:
        form = self._require_form()
        return self.store.update_form(
            form.id,
            title=self.title,
            description=self.description or None,
        )

    def _require_form(self) -> Form:
        form = self.current_form
        if form is None:
            raise NoCurrentFormError()

        return form

    def _write_fields(self, form: Form, fields) -> Form:
        return self.store.update_form(form.id, fields=tuple(fields))

    # ------------------------------------------------------------------
    # Fields
    # ------------------------------------------------------------------

    @property
    def selected_field(self) -> Optional[FormField]:
        form = self.current_form
        if form is None or self.selected_field_id is None:
            return None

        return form.get_field(self.selected_field_id)

    @property
    def current_page_fields(self) -> Tuple[FormField, ...]:
        form = self.current_form
        return form.fields_on_page(self.active_page) if form else ()

    def add_field(self, field: Union[FormField, Mapping]) -> FormField:
        ''' Append a field to the end of the current form. The caller
            provides its identifier and target page.
        '''
        form = self._require_form()

        if not isinstance(field, FormField):
            try:
                field = FormField.model_validate(field)
            except ValueError as e:
                raise InvalidFieldError("F00.120", f"Invalid field definition: {e}")

        if form.get_field(field.id) is not None:
            raise InvalidFieldError("F00.121", f"Field identifier already in use: {field.id}")

        self._check_page(field.page_number)
        self._write_fields(form, form.fields + (field,))
        logger.info("Field added [%s] %s on page %d", field.id, field.type, field.page_number)
        return field

    def add_field_from_palette(self, field_type) -> FormField:
        ''' Create the form if needed, then add a default field of the given
            type on the active page and select it.
        '''
        ftype = get_field_type(field_type)
        self.ensure_form()

        field = ftype.build_field(prefixed_identifier("field"), page_number=self.active_page)
        self.add_field(field)
        self.selected_field_id = field.id
        return field

    def update_field(self, field_id, **changes) -> Optional[FormField]:
        form = self._require_form()
        field = form.get_field(field_id)
        if field is None:
            logger.debug("Update ignored, field [%s] not found", field_id)
            return None

        if changes.get("id", field_id) != field_id:
            raise InvalidFieldError("F00.122", "Field identifiers cannot be changed")

        if "page_number" in changes:
            self._check_page(changes["page_number"])

        try:
            updated = field.merge(**changes)
        except ValueError as e:
            raise InvalidFieldError("F00.123", f"Invalid field update: {e}", {"field_id": field_id})

        self._write_fields(form, (updated if f.id == field_id else f for f in form.fields))
        return updated

    def remove_field(self, field_id) -> bool:
        form = self._require_form()
        if form.get_field(field_id) is None:
            return False

        self._write_fields(form, (f for f in form.fields if f.id != field_id))
        if self.selected_field_id == field_id:
            self.selected_field_id = None

        logger.info("Field removed [%s]", field_id)
        return True

    def reorder_fields(self, from_index: int, to_index: int) -> Tuple[FormField, ...]:
        form = self._require_form()
        try:
            fields = move_item(form.fields, from_index, to_index)
        except IndexError as e:
            raise InvalidFieldError("F00.124", f"Cannot move field: {e}")

        if from_index == to_index:
            return form.fields

        return self._write_fields(form, fields).fields

    def select_field(self, field_id) -> FormField:
        field = self._require_field(field_id)
        self.selected_field_id = field.id
        return field

    def _require_field(self, field_id) -> FormField:
        field = self._require_form().get_field(field_id)
        if field is None:
            raise FieldNotFoundError(field_id)

        return field

    # ------------------------------------------------------------------
    # Options of choice fields
    # ------------------------------------------------------------------

    def _choice_options(self, field_id) -> Tuple[FieldOption, ...]:
        field = self._require_field(field_id)
        if not get_field_type(field.type).has_options:
            raise InvalidFieldError("F00.125", f"Field [{field_id}] of type [{field.type}] has no options")

        return field.options or ()

    def add_option(self, field_id) -> FieldOption:
        options = self._choice_options(field_id)
        number = len(options) + 1
        option = FieldOption(
            id=prefixed_identifier("opt"),
            label=f"Option {number}",
            value=f"option_{number}",
        )
        self.update_field(field_id, options=options + (option,))
        return option

    def rename_option(self, field_id, option_id, label: str) -> FieldOption:
        options = self._choice_options(field_id)
        if option_id not in {opt.id for opt in options}:
            raise InvalidFieldError("F00.126", f"Option [{option_id}] not found in field [{field_id}]")

        renamed = FieldOption(id=option_id, label=label, value=underscore_label(label))
        self.update_field(field_id, options=tuple(renamed if opt.id == option_id else opt for opt in options))
        return renamed

    def remove_option(self, field_id, option_id) -> bool:
        options = self._choice_options(field_id)
        remaining = tuple(opt for opt in options if opt.id != option_id)
        if len(remaining) == len(options):
            return False

        self.update_field(field_id, options=remaining)
        return True

    # ------------------------------------------------------------------
    # Pages
    # ------------------------------------------------------------------

    @property
    def page_count(self) -> int:
        form = self.current_form
        return max(form.total_pages if form else 1, self._page_count)

    def _check_page(self, page) -> None:
        if not isinstance(page, int) or isinstance(page, bool) or not 1 <= page <= self.page_count:
            raise InvalidFieldError(
                "F00.127",
                f"Page [{page}] does not exist, valid pages are 1..{self.page_count}",
            )

    def add_page(self) -> int:
        ''' Open a new empty page after the last one and make it active. '''
        self._page_count = self.page_count + 1
        self.active_page = self._page_count
        logger.info("Page %d added", self.active_page)
        return self.active_page

    def remove_page(self, page: Optional[int] = None) -> int:
        ''' Remove an empty page. Fields on later pages move one page back. '''
        page = self.active_page if page is None else page
        self._check_page(page)

        form = self.current_form
        if form is not None and form.fields_on_page(page):
            logger.warning("Refused to remove page %d, it still has fields", page)
            raise PageNotEmptyError(page)

        count = self.page_count
        if count == 1:
            raise InvalidFieldError("F00.128", "A form always keeps at least one page")

        if form is not None and any(f.page_number > page for f in form.fields):
            self._write_fields(form, (
                f.set(page_number=f.page_number - 1) if f.page_number > page else f
                for f in form.fields
            ))

        self._page_count = count - 1
        if self.active_page >= page:
            self.active_page = max(1, self.active_page - 1)
        self.active_page = min(self.active_page, self._page_count)

        logger.info("Page %d removed", page)
        return self._page_count

    def goto_page(self, page: int) -> int:
        self._check_page(page)
        self.active_page = page
        return page

    def next_page(self) -> int:
        self.active_page = min(self.page_count, self.active_page + 1)
        return self.active_page

    def previous_page(self) -> int:
        self.active_page = max(1, self.active_page - 1)
        return self.active_page
