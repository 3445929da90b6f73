"""
Short code generation strategies for the link registry.
Uses Strategy Pattern so the registry does not care how codes are produced.
"""

import random
import string
import time
from abc import ABC, abstractmethod
from typing import Callable, Optional

from shortlink_app.exceptions import KeyspaceExhaustedError


# Seeded once per process from the clock. Not suitable for anything
# that needs unpredictable codes.
_process_rng = random.Random(time.time_ns())


class ShortCodeStrategy(ABC):
    """Abstract base class for short code generation strategies"""

    @abstractmethod
    def generate(self, is_taken: Callable[[str], bool]) -> str:
        """
        Generate a short code that is not already in use.

        Args:
            is_taken: Predicate telling whether a candidate code is occupied.
                      The registry calls this while holding its write lock.

        Returns:
            A free short code string

        Raises:
            KeyspaceExhaustedError: If no free code was found
        """
        pass


class RandomShortCodeStrategy(ShortCodeStrategy):
    """
    Random alphanumeric codes with retry-on-collision.

    62 symbols at length 6 gives ~5.7e10 codes, so a retry is rare and
    running out of attempts means the keyspace is effectively saturated.
    """

    def __init__(
        self,
        length: int = 6,
        max_retries: int = 10,
        rng: Optional[random.Random] = None
    ):
        if length < 1:
            raise ValueError("Short code length must be at least 1")
        if max_retries < 1:
            raise ValueError("max_retries must be at least 1")
        self.length = length
        self.max_retries = max_retries
        self.characters = string.ascii_letters + string.digits
        self.rng = rng or _process_rng

    def generate(self, is_taken: Callable[[str], bool]) -> str:
        """Generate random short code with collision checking"""
        for attempt in range(self.max_retries):
            short_code = self._generate_random_string()

            if not is_taken(short_code):
                return short_code

        raise KeyspaceExhaustedError(
            f"Could not generate unique short code after {self.max_retries} attempts"
        )

    def _generate_random_string(self) -> str:
        """Generate a random string of specified length"""
        return ''.join(self.rng.choice(self.characters) for _ in range(self.length))
