"""Review schemas shared by businesses and accommodations."""
from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import Field

from romeiro.schemas.base import ApiModel


class ReviewCreate(ApiModel):
    """Payload to submit a review."""

    rating: int = Field(ge=1, le=5)
    comment: str | None = Field(default=None, max_length=2000)
    author_name: str | None = Field(default=None, min_length=2, max_length=160)


class ReviewRead(ApiModel):
    id: uuid.UUID
    user_id: uuid.UUID | None = None
    author_name: str
    rating: int
    comment: str | None = None
    created_at: datetime


class BusinessReviewRead(ReviewRead):
    business_id: uuid.UUID


class AccommodationReviewRead(ReviewRead):
    accommodation_id: uuid.UUID
    approved: bool


class ReviewApproval(ApiModel):
    approved: bool = True
