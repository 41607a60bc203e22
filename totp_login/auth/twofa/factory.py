"""Factory for creating 2FA handlers with fallback chain."""

from enum import Enum
from typing import Dict, List, Optional, Type
from .base import TwoFAHandler
from .pyotp_handler import PyOTPHandler
from .manual_handler import ManualTwoFAHandler
from totp_login.config import settings
import logging

logger = logging.getLogger(__name__)


class TwoFAHandlerType(str, Enum):
    """2FA handler types."""

    PYOTP = "pyotp"
    MANUAL = "manual"


class TwoFAHandlerFactory:
    """Factory for creating 2FA handlers with fallback chain."""

    _handlers: Dict[TwoFAHandlerType, Type[TwoFAHandler]] = {
        TwoFAHandlerType.PYOTP: PyOTPHandler,
        TwoFAHandlerType.MANUAL: ManualTwoFAHandler,
    }

    @classmethod
    def create_handler_chain(
        cls, preferred_handlers: Optional[List[TwoFAHandlerType]] = None
    ) -> List[TwoFAHandler]:
        """Create a chain of 2FA handlers with fallback."""
        if preferred_handlers is None:
            # Use configuration-based preferences
            preferred_handlers = []
            for handler_name in settings.twofa_handler_preferences:
                try:
                    handler_type = TwoFAHandlerType(handler_name.strip())
                    preferred_handlers.append(handler_type)
                except ValueError:
                    logger.warning(f"Unknown 2FA handler type: {handler_name}")

        handlers = []
        for handler_type in preferred_handlers:
            handler = cls.create_handler(handler_type)
            if handler:
                handlers.append(handler)

        # Sort by priority (higher = preferred)
        return sorted(handlers, key=lambda h: h.get_priority(), reverse=True)

    @classmethod
    def create_handler(cls, handler_type: TwoFAHandlerType) -> Optional[TwoFAHandler]:
        """Create a specific 2FA handler."""
        handler_class = cls._handlers.get(handler_type)
        if not handler_class:
            logger.error(f"Unknown 2FA handler type: {handler_type}")
            return None

        handler = handler_class()
        logger.info(f"Created 2FA handler: {handler_type.value}")
        return handler

    @classmethod
    def create_default(cls) -> TwoFAHandler:
        """Return the highest priority configured handler."""
        chain = cls.create_handler_chain()
        if not chain:
            logger.warning("No 2FA handlers configured, falling back to pyotp")
            return PyOTPHandler()
        return chain[0]

    @classmethod
    def get_available_handlers(cls) -> List[TwoFAHandlerType]:
        """Get list of available 2FA handler types."""
        return list(cls._handlers.keys())
