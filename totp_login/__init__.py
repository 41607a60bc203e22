"""Browser sign-in with TOTP second-factor challenges."""

from .auth import AuthStrategyFactory, authenticate, wait_for_trial
from .models import AuthOptions, LoginRequest, LoginResponse

__version__ = "0.1.0"

__all__ = [
    "AuthOptions",
    "AuthStrategyFactory",
    "LoginRequest",
    "LoginResponse",
    "authenticate",
    "wait_for_trial",
]
