import uuid
from formcraft.data import config


def prefixed_identifier(prefix=None):
    ''' Short random string identifier, e.g. field_5b0c1e2a9f4d '''
    token = UUID_GENR().hex[:config.IDENTIFIER_HEX_LENGTH]
    return f"{prefix}_{token}" if prefix else token


UUID_GENR = uuid.uuid4  # Generate a random identifier
