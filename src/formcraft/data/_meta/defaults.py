DATE_FORMAT = '%Y-%m-%d'
# Prefix used for identifiers generated by `prefixed_identifier`, e.g. field_3f2a...
IDENTIFIER_HEX_LENGTH = 12
