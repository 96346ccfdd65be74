from formcraft import config, logger


DEBUG_APP_EXCEPTION = config.DEBUG_APP_EXCEPTION


class FormcraftException(Exception):
    status_code = 500
    label = "Internal Error"
    errcode = "A00.000"

    def __init__(self, errcode, message, details=None):
        super().__init__(message)
        self.message = message
        self.details = details
        self.errcode = errcode

        DEBUG_APP_EXCEPTION and logger.exception(message)

    def __str__(self):
        if self.details is None:
            return f"{self.errcode} [{self.status_code}] >> {self.message}"

        return f"{self.errcode} [{self.status_code}] >> {self.message} >> {self.details}"

    @property
    def content(self):
        if not self.details:
            return {"errcode": self.errcode, "message": self.message}

        return {"errcode": self.errcode, "message": self.message, "details": self.details}


class NotFoundError(FormcraftException):
    label = "Not Found"
    status_code = 404
    errcode = "A00.404"


class PreconditionFailedError(FormcraftException):
    label = "Precondition Failed"
    status_code = 412
    errcode = "A00.412"


class BadRequestError(FormcraftException):
    label = "Bad Request"
    status_code = 400
    errcode = "A00.400"

class ForbiddenError(FormcraftException):
    label = "Forbidden"
    status_code = 403
    errcode = "A00.403"


class UnprocessableError(FormcraftException):
    label = "Unprocessable Entity"
    status_code = 422
    errcode = "A00.422"
