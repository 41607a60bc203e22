"""PyOTP-based TOTP code generator."""

import logging

import pyotp

from .base import TwoFAHandler

logger = logging.getLogger(__name__)


class PyOTPHandler(TwoFAHandler):
    """2FA handler using PyOTP for TOTP generation."""

    def __init__(self, digits: int = 6, interval: int = 30):
        self.priority = 100  # High priority when available
        self.digits = digits
        self.interval = interval

    async def generate_code(self, secret: str) -> str:
        """Generate the TOTP code for the current time window."""
        if not secret:
            raise ValueError("A TOTP secret is required to generate a code")

        totp = pyotp.TOTP(secret, digits=self.digits, interval=self.interval)
        code = totp.now()
        logger.info("Generated TOTP code")
        return code

    def get_priority(self) -> int:
        """Get handler priority (higher = preferred)."""
        return self.priority
