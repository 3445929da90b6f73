import logging
from typing import List, Optional, Tuple

from shortlink_app.config import settings
from shortlink_app.exceptions import NameConflictError
from shortlink_app.registry import LinkRecord, Registry
from shortlink_app.services.duration import parse_duration


logger = logging.getLogger(__name__)


class LinkService:
    """
    Link service sitting between the HTTP routes and the registry.

    The registry is injected (not created internally), so every request
    handler and the reaper share one instance and tests can hand in
    a registry running on a fake clock.
    """

    # Names that would be shadowed by fixed routes
    RESERVED_NAMES = frozenset({
        "api", "clicks", "docs", "health", "openapi.json", "redoc", "shorten",
    })

    def __init__(self, registry: Registry, default_expiration: Optional[str] = None):
        """
        Args:
            registry: Shared link registry
            default_expiration: Duration string used when a request gives none
        """
        self.registry = registry
        self.default_expiration = default_expiration or settings.default_expiration

    def create_short_link(
        self,
        long_url: str,
        custom_name: Optional[str] = None,
        expires_in: Optional[str] = None
    ) -> Tuple[str, LinkRecord]:
        """Create a new short link

        Always creates a new short code, even if the long URL is already registered.

        Process:
        1. Parse the expiration (rejects malformed input before touching the registry)
        2. Refuse custom names that collide with fixed routes
        3. Register the link

        Returns:
            (short_code, record snapshot)

        Raises:
            InvalidExpirationError, InvalidTargetError, NameConflictError,
            KeyspaceExhaustedError
        """
        ttl = parse_duration(expires_in or self.default_expiration)

        if custom_name and custom_name in self.RESERVED_NAMES:
            raise NameConflictError(custom_name, reason="reserved")

        short_code = self.registry.create(long_url, ttl=ttl, custom_name=custom_name)
        logger.info("Created short link %s (expires in %s)", short_code, ttl)

        # Read back without the expiry check so a very short ttl cannot turn
        # a successful create into a not-found
        return short_code, self.registry.peek(short_code)

    def get_long_url_for_redirect(self, short_code: str) -> str:
        """
        Resolve a short code and count the click.

        The two registry calls are not atomic: if the link expires or is
        swept in between, the click is silently dropped.

        Raises:
            LinkNotFoundError
        """
        long_url = self.registry.resolve(short_code)
        self.registry.increment_clicks(short_code)
        return long_url

    def get_clicks(self, short_code: str) -> int:
        """Current click count, without counting a click."""
        return self.registry.lookup(short_code).clicks

    def get_link_info(self, short_code: str) -> LinkRecord:
        return self.registry.lookup(short_code)

    def list_active_links(self) -> List[Tuple[str, LinkRecord]]:
        return sorted(self.registry.active_links(), key=lambda item: item[1].created_at)

    @staticmethod
    def build_short_url(short_code: str, base_url: str) -> str:
        return f"{base_url.rstrip('/')}/{short_code}"
