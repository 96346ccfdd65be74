from pydantic import EmailStr

from formcraft.data import DataModel


class UserProfile(DataModel):
    id: str
    email: EmailStr
    name: str
