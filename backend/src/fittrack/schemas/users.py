from typing import ClassVar, Optional, Tuple

from .base import ApiModel, NonEmptyStr, UpdateModel


class UserBase(ApiModel):
    username: NonEmptyStr
    password: NonEmptyStr
    display_name: NonEmptyStr
    email: NonEmptyStr
    weight: Optional[float] = None
    height: Optional[float] = None
    avatar_url: Optional[str] = None


class UserCreate(UserBase):
    pass


class UserRead(UserBase):
    id: int


class UserUpdate(UpdateModel):
    non_nullable: ClassVar[Tuple[str, ...]] = ("username", "password", "display_name", "email")

    username: Optional[NonEmptyStr] = None
    password: Optional[NonEmptyStr] = None
    display_name: Optional[NonEmptyStr] = None
    email: Optional[NonEmptyStr] = None
    weight: Optional[float] = None
    height: Optional[float] = None
    avatar_url: Optional[str] = None


class UserPublic(ApiModel):
    """What the API hands out: the stored user minus the password."""

    id: int
    username: str
    display_name: str
    email: str
    weight: Optional[float] = None
    height: Optional[float] = None
    avatar_url: Optional[str] = None

    @classmethod
    def from_user(cls, user: UserRead) -> "UserPublic":
        return cls.model_validate(user.model_dump(exclude={"password"}))


class LoginRequest(ApiModel):
    username: Optional[str] = None
    password: Optional[str] = None
