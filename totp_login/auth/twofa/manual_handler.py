"""Manual 2FA handler for fallback scenarios."""

import asyncio
import logging
from typing import Callable

from .base import TwoFAHandler

logger = logging.getLogger(__name__)


class ManualTwoFAHandler(TwoFAHandler):
    """Asks the operator to type the one-time code."""

    def __init__(self, prompt: Callable[[str], str] = input):
        self.priority = 10  # Lower priority - used as fallback
        self.prompt = prompt

    async def generate_code(self, secret: str) -> str:
        """Read a code from the operator without blocking the event loop."""
        logger.info("Waiting for a one-time code from the operator...")
        code = await asyncio.to_thread(self.prompt, "Enter the one-time code: ")
        code = code.strip()
        if not code:
            raise ValueError("No one-time code was entered")
        return code

    def get_priority(self) -> int:
        """Get handler priority (higher = preferred)."""
        return self.priority
