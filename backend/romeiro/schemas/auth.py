"""Authentication schemas."""
from __future__ import annotations

from pydantic import BaseModel


class Token(BaseModel):
    """OAuth2 token response; keeps the snake_case keys of RFC 6749."""

    access_token: str
    token_type: str = "bearer"
