"""Base source abstract class defining the ingestion contract."""

from abc import ABC, abstractmethod
from typing import Any


class BaseSource(ABC):
    """Abstract base class for all leaderboard sources.

    A source hands over raw, unvalidated records; validation and scoring
    happen downstream.
    """

    @property
    @abstractmethod
    def source_name(self) -> str:
        """Return the source identifier (e.g., 'zeroeval', 'file')."""
        ...

    @abstractmethod
    async def fetch(self) -> list[Any]:
        """Fetch every raw record the source provides.

        Returns:
            List of raw records, normally JSON objects

        Raises:
            ValueError: If the payload is not a JSON array
        """
        ...


def ensure_record_list(payload: Any, origin: str) -> list[Any]:
    """Check that a decoded payload is a JSON array."""
    if not isinstance(payload, list):
        msg = f"Invalid payload from {origin}: expected a JSON array, got {type(payload).__name__}"
        raise ValueError(msg)
    return payload
