from pydantic import BaseModel, Field, field_validator, ConfigDict
from typing import Optional
from datetime import datetime

from shortlink_app.validators import is_valid_url, is_valid_custom_name


class LinkBase(BaseModel):
    long_url: str = Field(..., description="The original URL to be shortened")

    @field_validator("long_url")
    @classmethod
    def check_long_url(cls, value: str) -> str:
        # Kept as a plain string: HttpUrl would normalize it (trailing slash)
        # and the redirect must hand back exactly what was submitted
        value = value.strip()
        if not is_valid_url(value):
            raise ValueError("URL must be absolute, with a scheme and a host")
        return value


class LinkCreate(LinkBase):
    custom_name: Optional[str] = Field(None, description="Optional caller-chosen short code")
    expires_in: Optional[str] = Field(None, description="Lifetime such as 30m, 24h or 1h30m")

    @field_validator("custom_name")
    @classmethod
    def check_custom_name(cls, value: Optional[str]) -> Optional[str]:
        # Empty means "generate one for me", same as omitting it
        if value is None or value == "":
            return None
        is_valid, error = is_valid_custom_name(value)
        if not is_valid:
            raise ValueError(error)
        return value

    @field_validator("expires_in")
    @classmethod
    def blank_expiration_is_default(cls, value: Optional[str]) -> Optional[str]:
        return value or None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "long_url": "https://example.com",
                "custom_name": "my-link",
                "expires_in": "24h",
            }
        }
    )


class LinkCreated(LinkBase):
    short_code: str
    short_url: str
    expires_at: datetime
    custom_name: Optional[str] = None


class LinkInfo(LinkBase):
    """Response schema built straight from a registry LinkRecord"""
    short_code: str
    clicks: int
    created_at: datetime
    expires_at: datetime
    custom_name: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class ClickCount(BaseModel):
    clicks: int
