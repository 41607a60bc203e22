"""Base 2FA code generator interface."""

from abc import ABC, abstractmethod


class TwoFAHandler(ABC):
    """Abstract base class for one-time code generators."""

    @abstractmethod
    async def generate_code(self, secret: str) -> str:
        """Return a one-time code valid at the current instant."""
        pass

    @abstractmethod
    def get_priority(self) -> int:
        """Get handler priority (higher = preferred)."""
        pass
