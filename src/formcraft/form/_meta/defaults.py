DEFAULT_THANK_YOU_MESSAGE = "Thank you for your submission!"
DEFAULT_EMAIL_NOTIFICATIONS = False
DEFAULT_CREATED_BY = "1"
DEFAULT_FIELD_LABEL = "New Field"

# local-part "@" domain, with at least one "." in the domain
EMAIL_PATTERN = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"

# Remove the responses of a form together with the form.
CASCADE_DELETE_RESPONSES = True

ANSWER_LIST_SEPARATOR = ", "
SUBMISSION_FAILED_MESSAGE = "Submission failed. Please try again."
UNAVAILABLE_MESSAGE = "This form is currently not accepting responses."
NOT_FOUND_MESSAGE = "This form doesn't exist or has been removed."
