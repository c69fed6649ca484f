"""User-related schemas."""

from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import EmailStr, Field, field_validator, model_validator

from romeiro.models.user import UserRole
from romeiro.schemas.base import ApiModel


class UserRead(ApiModel):
    """Serialized user; never carries the password hash."""

    id: uuid.UUID
    name: str
    email: str
    phone: str | None = None
    city: str | None = None
    state: str | None = None
    avatar_url: str | None = None
    receive_news: bool
    accepted_terms: bool
    role: UserRole
    created_at: datetime


class UserRegister(ApiModel):
    """Self-service registration payload."""

    name: str = Field(min_length=2)
    email: EmailStr
    phone: str | None = None
    password: str = Field(min_length=6)
    confirm_password: str
    city: str | None = None
    state: str | None = None
    receive_news: bool = False
    accepted_terms: bool

    @field_validator("accepted_terms")
    @classmethod
    def _terms_must_be_accepted(cls, value: bool) -> bool:
        if not value:
            raise ValueError("Terms of use must be accepted")
        return value

    @model_validator(mode="after")
    def _passwords_match(self) -> "UserRegister":
        if self.password != self.confirm_password:
            raise ValueError("Passwords do not match")
        return self


class UserProfileUpdate(ApiModel):
    """Mutable profile fields."""

    name: str | None = Field(default=None, min_length=2)
    email: EmailStr | None = None
    phone: str | None = None
    city: str | None = None
    state: str | None = None
    avatar_url: str | None = None
    receive_news: bool | None = None


class RegistrationResponse(ApiModel):
    user: UserRead
    message: str
