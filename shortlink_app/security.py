"""
Access-control gates, run as FastAPI dependencies before any registry call.

The service has no user model: the JSON API is guarded by one static shared
secret and the browser-facing creation route by a referrer check.
"""

import hmac
import logging
from typing import Optional

from fastapi import Header, HTTPException, status

from shortlink_app.config import settings


logger = logging.getLogger(__name__)


def require_api_key(x_api_key: Optional[str] = Header(None)):
    """Reject requests whose X-API-Key header does not match the configured key."""
    if not x_api_key or not hmac.compare_digest(x_api_key, settings.api_key):
        logger.warning("Rejected API request with missing or invalid API key")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized"
        )


def require_trusted_referer(referer: Optional[str] = Header(None)):
    """Only accept browser submissions coming from our own pages."""
    if not referer or not any(referer.startswith(prefix) for prefix in settings.allowed_referers):
        logger.warning("Rejected form submission from referer %r", referer)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Forbidden"
        )
