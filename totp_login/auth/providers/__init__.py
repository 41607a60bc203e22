"""Authentication providers."""

from .google import GoogleAuthStrategy
from .generic import GenericAuthStrategy

__all__ = [
    "GoogleAuthStrategy",
    "GenericAuthStrategy",
]
