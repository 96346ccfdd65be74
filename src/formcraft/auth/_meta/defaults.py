# Key of the slot holding the signed in user, shape {id, email, name}
USER_STORAGE_KEY = "formbuilder_user"
MIN_PASSWORD_LENGTH = 6
MOCK_USER_ID = "1"
