from typing import Optional

from formcraft.data import deserialize_json, serialize_json

from .datadef import UserProfile
from .storage import MemorySlotStorage, SlotStorage
from . import config, logger


class AuthSession(object):
    """
    Mock authentication: any email with a long enough password signs in.
    The signed in user survives through the storage slot.
    """

    def __init__(self, storage: Optional[SlotStorage] = None):
        self.storage = storage if storage is not None else MemorySlotStorage()
        self._user = self._restore()

    def _restore(self) -> Optional[UserProfile]:
        raw = self.storage.get(config.USER_STORAGE_KEY)
        if not raw:
            return None

        try:
            return UserProfile.model_validate(deserialize_json(raw))
        except ValueError as e:
            logger.warning("Discarding invalid stored user: %s", e)
            self.storage.remove(config.USER_STORAGE_KEY)
            return None

    @property
    def user(self) -> Optional[UserProfile]:
        return self._user

    @property
    def is_authenticated(self) -> bool:
        return self._user is not None

    def login(self, email: str, password: str) -> bool:
        if not email or len(password or "") < config.MIN_PASSWORD_LENGTH:
            logger.info("Login rejected for %r", email)
            return False

        try:
            user = UserProfile(id=config.MOCK_USER_ID, email=email, name=email.split("@")[0])
        except ValueError:
            logger.info("Login rejected, invalid email %r", email)
            return False

        self.storage.set(config.USER_STORAGE_KEY, serialize_json(user))
        self._user = user
        logger.info("User signed in [%s]", user.email)
        return True

    def logout(self) -> None:
        self._user = None
        self.storage.remove(config.USER_STORAGE_KEY)
