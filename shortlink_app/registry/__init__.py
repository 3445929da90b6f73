"""
In-memory link registry.
Owns the short code -> record mapping and all of its synchronization.
"""

from .locks import ReadWriteLock
from .models import LinkRecord
from .store import DEFAULT_TTL, Registry

__all__ = [
    "DEFAULT_TTL",
    "LinkRecord",
    "ReadWriteLock",
    "Registry",
]
