"""Shared schema configuration."""

from __future__ import annotations

from typing import TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class ApiModel(BaseModel):
    """Base schema; serialises camelCase, accepts camelCase or snake_case."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageResponse(ApiModel):
    message: str


def reject_null(value: T | None) -> T:
    """Field validator for partial updates: a required column may be omitted, not nulled.

    Only explicitly sent values are validated, so omitted fields keep their
    ``None`` default.
    """
    if value is None:
        raise ValueError("may be omitted but not null")
    return value
