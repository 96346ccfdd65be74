"""
Respondent side validation of answers against field definitions.

Errors are user-correctable and reported per field, they are never raised.
"""
import re
from typing import Dict, Iterable, Mapping, Optional

from .answer import BaseAnswer, NumberAnswer
from .datadef import FieldType, FormField
from . import config

RX_EMAIL = re.compile(config.EMAIL_PATTERN)


def is_valid_email(value: str) -> bool:
    return bool(RX_EMAIL.fullmatch(value))


def check_rules(field: FormField, answer: BaseAnswer) -> Optional[str]:
    rules = field.validation_rules
    if rules is None:
        return None

    text = answer.text
    if text is not None:
        if rules.min_length is not None and len(text) < rules.min_length:
            return f"{field.label} must be at least {rules.min_length} characters"

        if rules.max_length is not None and len(text) > rules.max_length:
            return f"{field.label} must be at most {rules.max_length} characters"

        if rules.pattern:
            try:
                matched = re.fullmatch(rules.pattern, text)
            except re.error:
                # A broken pattern configured in the builder never blocks respondents.
                matched = True

            if not matched:
                return f"{field.label} has an invalid format"

    if isinstance(answer, NumberAnswer):
        if rules.min is not None and answer.value < rules.min:
            return f"{field.label} must be at least {rules.min}"

        if rules.max is not None and answer.value > rules.max:
            return f"{field.label} must be at most {rules.max}"

    return None


def validate_field(field: FormField, answer: Optional[BaseAnswer]) -> Optional[str]:
    ''' First failing check of a single field, None when the answer is acceptable. '''
    if answer is None or answer.is_empty():
        return f"{field.label} is required" if field.required else None

    if field.type == FieldType.EMAIL and not is_valid_email(answer.text or ""):
        return "Please enter a valid email address"

    return check_rules(field, answer)


def validate_fields(fields: Iterable[FormField], answers: Mapping[str, BaseAnswer]) -> Dict[str, str]:
    ''' Collect the errors of every field, keyed by field identifier. '''
    errors = {}
    for field in fields:
        message = validate_field(field, answers.get(field.id))
        if message:
            errors[field.id] = message

    return errors
