"""
FastAPI dependencies for dependency injection.

This module provides the process-wide registry that is injected into
services, routes and the background reaper.

Pattern: Dependency Injection
- One explicitly constructed Registry, no hidden global store
- Easy to test (override get_registry with a registry on a fake clock)
"""

from functools import lru_cache

from fastapi import Depends

from shortlink_app.config import settings
from shortlink_app.registry import Registry
from shortlink_app.services.duration import parse_duration
from shortlink_app.services.link_service import LinkService
from shortlink_app.services.short_code_strategies import RandomShortCodeStrategy


@lru_cache()
def get_registry() -> Registry:
    """
    Get registry instance (singleton).

    @lru_cache ensures this is built only once per process.
    """
    strategy = RandomShortCodeStrategy(
        length=settings.short_code_length,
        max_retries=settings.max_retries
    )
    return Registry(
        short_code_strategy=strategy,
        default_ttl=parse_duration(settings.default_expiration)
    )


def get_link_service(registry: Registry = Depends(get_registry)) -> LinkService:
    """
    Get LinkService with the shared registry injected.

    Controllers depend on the service, the service depends on the registry.
    """
    return LinkService(registry=registry)
