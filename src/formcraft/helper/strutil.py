import re

RX_CAMEL_BOUNDARY = re.compile(r'(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])')
RX_WHITESPACE = re.compile(r'\s+')


def camel_to_lower(name: str, sep: str = '-') -> str:
    ''' FirstNameField => first-name-field '''
    return RX_CAMEL_BOUNDARY.sub(sep, name).lower()


def underscore_label(label: str) -> str:
    ''' Derive a machine value from a display label: "Very Satisfied" => "very_satisfied" '''
    return RX_WHITESPACE.sub('_', label.lower())
