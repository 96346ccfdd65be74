import json
import uuid
from types import SimpleNamespace
from dataclasses import is_dataclass, asdict

from datetime import datetime, date
from enum import Enum
from json.encoder import JSONEncoder
from pyrsistent import PMap, PVector

from formcraft.data import config
from formcraft.data.data_model import DataModel


class FormcraftJSONEncoder(JSONEncoder):
    ''' Sample usage:

        from formcraft.data import JSONEncoder
        json.dumps(form, cls=JSONEncoder)
    '''

    def default(self, obj):
        if isinstance(obj, uuid.UUID):
            return str(obj)

        if isinstance(obj, PMap):
            return dict(obj)

        if isinstance(obj, PVector):
            return list(obj)

        if isinstance(obj, SimpleNamespace):
            return obj.__dict__

        if isinstance(obj, DataModel):
            return obj.model_dump(mode='json')

        if is_dataclass(obj):
            return asdict(obj)

        if isinstance(obj, datetime):
            return obj.isoformat()

        if isinstance(obj, (set, tuple)):
            return list(obj)

        if isinstance(obj, Enum):
            return obj.value

        if isinstance(obj, date):
            return obj.strftime(config.DATE_FORMAT)

        return super().default(obj)


def serialize_json(data, cls=FormcraftJSONEncoder, **kwargs) -> str:
    return json.dumps(data, cls=cls, **kwargs)


def deserialize_json(data_str):
    return json.loads(data_str)
