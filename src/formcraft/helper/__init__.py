from .timeutil import timestamp, parse_iso_date
from .strutil import camel_to_lower, underscore_label
from .sequtil import move_item, unique
from .registry import ClassRegistry
