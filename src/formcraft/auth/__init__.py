from ._meta import config, logger
from .datadef import UserProfile
from .storage import SlotStorage, MemorySlotStorage
from .session import AuthSession

__all__ = ("config", "logger", "UserProfile", "SlotStorage", "MemorySlotStorage", "AuthSession")
