"""Validation utilities shared by the registry and the request schemas."""

import re
from typing import Tuple
from urllib.parse import urlparse


CUSTOM_NAME_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")
MAX_CUSTOM_NAME_LENGTH = 64


def is_valid_url(url: str) -> bool:
    """True when ``url`` is an absolute URL with a non-empty scheme and host."""
    if not url or not isinstance(url, str):
        return False

    try:
        parsed = urlparse(url)
    except ValueError:
        return False

    try:
        hostname = parsed.hostname
    except ValueError:
        return False

    return bool(parsed.scheme) and bool(hostname)


def is_valid_custom_name(name: str) -> Tuple[bool, str]:
    """Validate a caller-chosen short code.

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not name or not isinstance(name, str):
        return False, "Custom name is required"

    if len(name) > MAX_CUSTOM_NAME_LENGTH:
        return False, f"Custom name must be at most {MAX_CUSTOM_NAME_LENGTH} characters"

    # Must stay a single path segment
    if not CUSTOM_NAME_PATTERN.match(name):
        return False, "Custom name can only contain letters, numbers, hyphens, and underscores"

    return True, ""
