"""Random string data store feeding the list screen."""

from __future__ import annotations

import random
import string
from typing import ClassVar, List, Optional

from loguru import logger

ALPHABET = string.ascii_letters + string.digits


class DataStore:
    """Generates lists of random alphanumeric strings.

    Args:
        min_length: Shortest generated string
        max_length: Longest generated string
        seed: Seed for reproducible output (None = system randomness)
    """

    _shared: ClassVar[Optional[DataStore]] = None

    def __init__(
        self,
        min_length: int = 8,
        max_length: int = 16,
        seed: Optional[int] = None,
    ) -> None:
        if min_length < 1 or min_length > max_length:
            raise ValueError(f"invalid string length range {min_length}..{max_length}")
        self.min_length = min_length
        self.max_length = max_length
        self._random = random.Random(seed)

    @classmethod
    def shared(cls) -> DataStore:
        """Process-wide store instance."""
        if cls._shared is None:
            cls._shared = cls()
        return cls._shared

    def random_string(self) -> str:
        length = self._random.randint(self.min_length, self.max_length)
        return "".join(self._random.choices(ALPHABET, k=length))

    def data_array(self, count: int) -> List[str]:
        """Generate ``count`` random strings.

        Args:
            count: Number of strings to generate

        Returns:
            New list of strings

        Raises:
            ValueError: If count is negative
        """
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        data = [self.random_string() for _ in range(count)]
        logger.debug(f"Generated {count} random strings")
        return data
