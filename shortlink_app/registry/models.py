"""
Data models for registry entries.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class LinkRecord(BaseModel):
    """
    One entry per active short code.

    The registry owns the live instances; everything it hands out is a copy,
    so callers can read these freely without holding any lock.
    """

    long_url: str = Field(..., description="Destination URL, immutable after creation")
    expires_at: datetime = Field(..., description="The link is invalid strictly after this instant")
    created_at: datetime = Field(..., description="When the link was created")
    custom_name: Optional[str] = Field(None, description="Caller-chosen name, None if generated")
    clicks: int = Field(0, ge=0, description="Number of successful redirects")

    def is_expired(self, now: datetime) -> bool:
        return now > self.expires_at
