"""
Background maintenance for the link registry.
"""

from .reaper import ExpiredLinkReaper

__all__ = [
    "ExpiredLinkReaper",
]
