"""Factory pattern for creating authentication strategies."""

import logging
from typing import Dict, List, Optional, Type

from ..models import AuthProvider
from .base import AuthStrategy
from .providers import GenericAuthStrategy, GoogleAuthStrategy
from .twofa import TwoFAHandler


logger = logging.getLogger(__name__)


class AuthStrategyFactory:
    """Factory for creating authentication strategies."""

    _strategies: Dict[AuthProvider, Type[AuthStrategy]] = {
        AuthProvider.GOOGLE: GoogleAuthStrategy,
        AuthProvider.GENERIC: GenericAuthStrategy,
    }

    @classmethod
    def create_strategy(
        cls, provider: AuthProvider, code_generator: Optional[TwoFAHandler] = None
    ) -> AuthStrategy:
        """Create an authentication strategy for the given provider."""
        strategy_class = cls._strategies.get(provider)

        if strategy_class is None:
            raise ValueError(f"Unsupported provider: {provider}")

        strategy = strategy_class(code_generator)
        logger.info(f"Created {strategy.__class__.__name__} for {provider.value}")
        return strategy

    @classmethod
    def get_supported_providers(cls) -> List[AuthProvider]:
        """Get list of supported providers."""
        return list(cls._strategies.keys())

    @classmethod
    def register_strategy(cls, provider: AuthProvider, strategy_class: Type[AuthStrategy]) -> None:
        """Register a strategy for a provider."""
        cls._strategies[provider] = strategy_class
        logger.info(f"Registered strategy for {provider.value}: {strategy_class.__name__}")
