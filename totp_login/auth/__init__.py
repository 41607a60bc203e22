"""Authentication module."""

from .base import AuthStrategy
from .factory import AuthStrategyFactory
from .flow import authenticate, first_completed, race_for_target
from .settle import wait_for_trial
from .snapshot import capture_snapshot, display_snapshot

__all__ = [
    "AuthStrategy",
    "AuthStrategyFactory",
    "authenticate",
    "first_completed",
    "race_for_target",
    "wait_for_trial",
    "capture_snapshot",
    "display_snapshot",
]
