import pytest

from formcraft.auth import AuthSession, MemorySlotStorage, UserProfile, config
from formcraft.data import deserialize_json


@pytest.fixture
def storage():
    return MemorySlotStorage()


def test_login_persists_profile(storage):
    session = AuthSession(storage)
    assert not session.is_authenticated

    assert session.login("ann@example.com", "secret1")
    assert session.user == UserProfile(id=config.MOCK_USER_ID, email="ann@example.com", name="ann")
    assert deserialize_json(storage.get(config.USER_STORAGE_KEY)) == {
        "id": "1",
        "email": "ann@example.com",
        "name": "ann",
    }

    restored = AuthSession(storage)
    assert restored.is_authenticated
    assert restored.user.name == "ann"


@pytest.mark.parametrize("email,password", [
    ("", "secret1"),
    ("ann@example.com", ""),
    ("ann@example.com", "12345"),
    ("ann", "secret1"),
])
def test_login_rejected(storage, email, password):
    session = AuthSession(storage)

    assert session.login(email, password) is False
    assert session.user is None
    assert storage.get(config.USER_STORAGE_KEY) is None


def test_minimum_password_length_is_accepted(storage):
    assert AuthSession(storage).login("bo@example.com", "123456")


def test_logout_clears_slot(storage):
    session = AuthSession(storage)
    session.login("ann@example.com", "secret1")

    session.logout()

    assert not session.is_authenticated
    assert storage.get(config.USER_STORAGE_KEY) is None
    assert not AuthSession(storage).is_authenticated


@pytest.mark.parametrize("stored", ["{not json", '{"id": "1"}'])
def test_invalid_stored_user_is_discarded(stored):
    storage = MemorySlotStorage({config.USER_STORAGE_KEY: stored})

    session = AuthSession(storage)

    assert session.user is None
    assert storage.get(config.USER_STORAGE_KEY) is None
