from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from todoapp.models import User


class SignupIn(BaseModel):
    email: EmailStr
    password: str = Field(min_length=6, max_length=72)
    name: Optional[str] = Field(default=None, max_length=120)


class LoginIn(BaseModel):
    email: EmailStr
    password: str = Field(min_length=6, max_length=72)


class UserOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    email: str
    name: Optional[str] = None
    image: Optional[str] = None
    email_verified: bool = Field(default=False, alias="emailVerified")

    @classmethod
    def from_model(cls, user: User) -> "UserOut":
        return cls(
            id=user.id,
            email=user.email,
            name=user.name,
            image=user.image,
            email_verified=user.email_verified,
        )

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True)
