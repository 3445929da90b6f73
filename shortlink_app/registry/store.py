"""
In-memory registry mapping short codes to link records.

All state lives in one dict guarded by one reader/writer lock. Nothing here
does I/O, so every lock is held only for the duration of a map operation.
State is volatile and lost when the process exits.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, List, Optional, Tuple

from shortlink_app.exceptions import (
    InvalidExpirationError,
    InvalidTargetError,
    LinkNotFoundError,
    NameConflictError,
)
from shortlink_app.registry.locks import ReadWriteLock
from shortlink_app.registry.models import LinkRecord
from shortlink_app.services.short_code_strategies import (
    RandomShortCodeStrategy,
    ShortCodeStrategy,
)
from shortlink_app.validators import is_valid_url


logger = logging.getLogger(__name__)

DEFAULT_TTL = timedelta(hours=24)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Registry:
    """
    Concurrent expiring map from short code to LinkRecord.

    Expired records are never returned as valid, but they are only physically
    removed when a lookup trips over them (lazy eviction) or when sweep() runs.
    Until then an expired record still occupies its name.

    Args:
        short_code_strategy: Generates codes when no custom name is given
        clock: Returns the current time (timezone-aware); injectable for tests
        default_ttl: Lifetime used when create() is called without a ttl
    """

    def __init__(
        self,
        short_code_strategy: Optional[ShortCodeStrategy] = None,
        clock: Callable[[], datetime] = utc_now,
        default_ttl: timedelta = DEFAULT_TTL
    ):
        self._links: Dict[str, LinkRecord] = {}
        self._lock = ReadWriteLock()
        self.short_code_strategy = short_code_strategy or RandomShortCodeStrategy()
        self.clock = clock
        self.default_ttl = default_ttl

    def create(
        self,
        long_url: str,
        ttl: Optional[timedelta] = None,
        custom_name: Optional[str] = None
    ) -> str:
        """
        Register a new link and return its short code.

        Raises:
            InvalidTargetError: long_url has no scheme or host
            InvalidExpirationError: ttl is not positive, or expires past datetime.max
            NameConflictError: custom_name is already a key
            KeyspaceExhaustedError: no free generated code within the retry budget
        """
        if not is_valid_url(long_url):
            raise InvalidTargetError(f"Invalid URL: {long_url!r}")

        if ttl is None:
            ttl = self.default_ttl
        if ttl <= timedelta(0):
            raise InvalidExpirationError("Expiration must be a positive duration")

        with self._lock.write_lock():
            now = self.clock()
            try:
                expires_at = now + ttl
            except OverflowError:
                raise InvalidExpirationError(f"Expiration {ttl} is too far in the future")

            if custom_name:
                if custom_name in self._links:
                    raise NameConflictError(custom_name)
                short_code = custom_name
            else:
                short_code = self.short_code_strategy.generate(self._links.__contains__)

            self._links[short_code] = LinkRecord(
                long_url=long_url,
                expires_at=expires_at,
                created_at=now,
                custom_name=custom_name or None,
            )

        logger.debug("Created %s -> %s (ttl=%s)", short_code, long_url, ttl)
        return short_code

    def resolve(self, short_code: str) -> str:
        """Return the destination URL, or raise LinkNotFoundError. Does not count a click."""
        return self.lookup(short_code).long_url

    def lookup(self, short_code: str) -> LinkRecord:
        """
        Return a snapshot of the live record for short_code.

        An expired record found here is evicted before LinkNotFoundError is raised.
        """
        now = self.clock()

        with self._lock.read_lock():
            record = self._links.get(short_code)
            if record is not None and not record.is_expired(now):
                return record.model_copy()

        if record is not None:
            self._evict_if_expired(short_code, now)

        raise LinkNotFoundError(short_code)

    def increment_clicks(self, short_code: str) -> None:
        """
        Count one click. No-op for unknown codes.

        Expiration is not re-checked here; callers resolve first.
        """
        with self._lock.write_lock():
            record = self._links.get(short_code)
            if record is not None:
                record.clicks += 1

    def is_name_available(self, name: str) -> bool:
        """True iff name is not a key, expired or not."""
        with self._lock.read_lock():
            return name not in self._links

    def sweep(self, now: Optional[datetime] = None) -> int:
        """
        Remove every record with expires_at < now.

        Returns:
            Number of records removed
        """
        if now is None:
            now = self.clock()

        with self._lock.write_lock():
            expired = [
                short_code
                for short_code, record in self._links.items()
                if record.expires_at < now
            ]
            for short_code in expired:
                del self._links[short_code]

        if expired:
            logger.info("Swept %d expired link(s)", len(expired))
        return len(expired)

    def peek(self, short_code: str) -> Optional[LinkRecord]:
        """Snapshot of the stored record, expired or not. Never evicts."""
        with self._lock.read_lock():
            record = self._links.get(short_code)
            return record.model_copy() if record is not None else None

    def active_links(self) -> List[Tuple[str, LinkRecord]]:
        """Snapshot of all unexpired links."""
        now = self.clock()
        with self._lock.read_lock():
            return [
                (short_code, record.model_copy())
                for short_code, record in self._links.items()
                if not record.is_expired(now)
            ]

    def _evict_if_expired(self, short_code: str, now: datetime) -> None:
        with self._lock.write_lock():
            # Re-check: the code may have been swept and re-created meanwhile
            record = self._links.get(short_code)
            if record is not None and record.is_expired(now):
                del self._links[short_code]
                logger.debug("Evicted expired link %s", short_code)

    def __len__(self) -> int:
        with self._lock.read_lock():
            return len(self._links)

    def __contains__(self, short_code: str) -> bool:
        with self._lock.read_lock():
            return short_code in self._links
