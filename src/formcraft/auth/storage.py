from typing import Dict, Optional


class SlotStorage(object):
    ''' Key/value slots holding serialized strings, like browser storage. '''

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove(self, key: str) -> None:
        raise NotImplementedError


class MemorySlotStorage(SlotStorage):
    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._slots = dict(initial or {})

    def get(self, key):
        return self._slots.get(key)

    def set(self, key, value):
        self._slots[key] = value

    def remove(self, key):
        self._slots.pop(key, None)
