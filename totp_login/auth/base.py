"""Base classes for authentication strategies."""

import logging
import time
from abc import ABC, abstractmethod
from typing import Optional

from playwright.async_api import Page

from totp_login.constants import DEFAULT_TIMEOUT
from totp_login.models import AuthOptions, AuthProvider, LoginRequest, LoginResponse
from .flow import authenticate
from .twofa import TwoFAHandler, TwoFAHandlerFactory

logger = logging.getLogger(__name__)


class AuthStrategy(ABC):
    """Base authentication strategy for a sign-in page with a TOTP challenge."""

    def __init__(self, code_generator: Optional[TwoFAHandler] = None):
        self.code_generator = code_generator

    @property
    @abstractmethod
    def provider(self) -> AuthProvider:
        """Return the authentication provider."""
        pass

    def get_start_url(self, request: LoginRequest) -> Optional[str]:
        """URL to open before signing in, or None to use the page as is."""
        return request.start_url

    @abstractmethod
    def get_target_selector(self, request: LoginRequest) -> str:
        """Selector that only appears once the user is signed in."""
        pass

    def get_options(self, request: LoginRequest) -> AuthOptions:
        """Environment defaults overlaid with the request's overrides."""
        return AuthOptions.from_settings().merged(request.options)

    async def authenticate(self, page: Page, request: LoginRequest) -> LoginResponse:
        """Main authentication flow."""
        start_time = time.perf_counter()
        try:
            options = self.get_options(request)
            target_selector = self.get_target_selector(request)
            code_generator = self.code_generator or TwoFAHandlerFactory.create_default()

            start_url = self.get_start_url(request)
            if start_url:
                logger.info(f"Navigating to {start_url}")
                await page.goto(start_url, wait_until="domcontentloaded", timeout=DEFAULT_TIMEOUT)

            element = await authenticate(
                page,
                request.email,
                request.password,
                request.totp_secret,
                target_selector,
                options=options,
                code_generator=code_generator,
            )

            if element is None:
                success, message = False, f"Sign-in was not confirmed: {target_selector} never appeared"
                logger.warning(message)
            else:
                success, message = True, "Login successful"
                logger.info(message)

        except Exception as e:
            logger.error(f"Authentication error: {e}")
            success, message = False, f"Authentication error: {str(e)}"

        return LoginResponse(
            success=success,
            message=message,
            provider=self.provider,
            execution_time_ms=(time.perf_counter() - start_time) * 1000,
            url=page.url,
        )
