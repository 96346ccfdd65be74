from ._meta import config, logger
from .data_model import DataModel
from .identifier import UUID_GENR, prefixed_identifier
from .serializer import FormcraftJSONEncoder as JSONEncoder, serialize_json, deserialize_json


__all__ = (
    "config",
    "DataModel",
    "deserialize_json",
    "JSONEncoder",
    "logger",
    "prefixed_identifier",
    "serialize_json",
    "UUID_GENR",
)
