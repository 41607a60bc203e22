"""2FA code generation module."""

from .base import TwoFAHandler
from .pyotp_handler import PyOTPHandler
from .manual_handler import ManualTwoFAHandler
from .factory import TwoFAHandlerFactory, TwoFAHandlerType

__all__ = [
    "TwoFAHandler",
    "PyOTPHandler",
    "ManualTwoFAHandler",
    "TwoFAHandlerFactory",
    "TwoFAHandlerType",
]
