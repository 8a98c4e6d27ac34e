import re
import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator, model_validator

from movie_catalog.domain.models.role import Role

PASSWORD_PATTERN = re.compile(r"^(?=.*[^\W\d_])(?=.*\d).{8,32}$")


class UserSchema(BaseModel):
    email: EmailStr
    full_name: str = Field(min_length=1)
    password: str
    password_repeat: str

    @field_validator("password")
    @classmethod
    def check_password_strength(cls, value: str) -> str:
        if not PASSWORD_PATTERN.match(value):
            raise ValueError("Password must be 8 to 32 characters long and contain a letter and a digit")
        return value

    @model_validator(mode="after")
    def check_passwords_match(self) -> "UserSchema":
        if self.password != self.password_repeat:
            raise ValueError("Passwords do not match")
        return self


class UserUpdateSchema(BaseModel):
    roles: Optional[List[Role]] = None
    verified: Optional[bool] = None


class UserPublic(BaseModel):
    id: uuid.UUID
    email: str
    full_name: str
    roles: List[Role]
    verified: bool
    created_at: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)


class UserList(BaseModel):
    users: list[UserPublic]
