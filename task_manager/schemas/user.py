"""
Request and response schemas for signup, login and profile.
"""
from typing import Any, NamedTuple
from pydantic import BaseModel, Field

from ..core.errors import ValidationError
from ..utils.validation import validate_email
from .common import DocumentOut, is_blank

MIN_PASSWORD_LENGTH = 4


class SignupData(NamedTuple):
    name: str
    email: str
    password: str


class LoginData(NamedTuple):
    email: str
    password: str


class SignupPayload(BaseModel):
    """Raw signup body; values are checked by parse() in a fixed order"""
    name: Any = None
    email: Any = None
    password: Any = None

    def parse(self) -> SignupData:
        values = (self.name, self.email, self.password)
        if any(is_blank(value) for value in values):
            raise ValidationError("Please fill all the fields")
        if not all(isinstance(value, str) for value in values):
            raise ValidationError("Please send string values only")
        if len(self.password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f"Password length must be atleast {MIN_PASSWORD_LENGTH} characters"
            )
        if not validate_email(self.email):
            raise ValidationError("Invalid Email")
        return SignupData(self.name, self.email, self.password)


class LoginPayload(BaseModel):
    email: Any = None
    password: Any = None

    def parse(self) -> LoginData:
        if is_blank(self.email) or is_blank(self.password):
            raise ValidationError("Please enter all details!!")
        if not isinstance(self.email, str) or not isinstance(self.password, str):
            raise ValidationError("Please send string values only")
        return LoginData(self.email, self.password)


class UserOut(DocumentOut):
    name: str
    email: str


class LoginUserOut(UserOut):
    """The matched user as returned by login, stored hash included"""
    password: str = Field(..., description="Stored password hash")
