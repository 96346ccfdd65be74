from formcraft.error import (
    BadRequestError,
    ForbiddenError,
    NotFoundError,
    PreconditionFailedError,
    UnprocessableError,
)

from . import config


class FormNotFoundError(NotFoundError):
    label = "Form Not Found"
    errcode = "F00.404"

    def __init__(self, form_id, message=None):
        super().__init__(self.errcode, message or config.NOT_FOUND_MESSAGE, {"form_id": form_id})


class FieldNotFoundError(NotFoundError):
    errcode = "F00.405"

    def __init__(self, field_id):
        super().__init__(self.errcode, f"Field not found: {field_id}", {"field_id": field_id})


class FormUnavailableError(ForbiddenError):
    label = "Form Unavailable"
    errcode = "F00.403"

    def __init__(self, form_id, message=None):
        super().__init__(self.errcode, message or config.UNAVAILABLE_MESSAGE, {"form_id": form_id})


class FormTitleRequiredError(PreconditionFailedError):
    errcode = "F00.412"

    def __init__(self):
        super().__init__(self.errcode, "Please add a title. Enter a form title before adding fields.")


class NoCurrentFormError(PreconditionFailedError):
    errcode = "F00.413"

    def __init__(self):
        super().__init__(self.errcode, "No form is currently being edited.")


class PageNotEmptyError(UnprocessableError):
    errcode = "F00.422"

    def __init__(self, page):
        super().__init__(
            self.errcode,
            "Cannot remove page. Remove all fields from this page first.",
            {"page": page}
        )


class NoDataToExportError(UnprocessableError):
    errcode = "F00.423"

    def __init__(self, form_id):
        super().__init__(self.errcode, "There are no responses to export.", {"form_id": form_id})


class InvalidFieldError(BadRequestError):
    errcode = "F00.400"
