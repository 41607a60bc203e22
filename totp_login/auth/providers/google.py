"""Google authentication strategy."""

import logging
from typing import Optional

from totp_login.models import AuthProvider, LoginRequest
from totp_login.auth.base import AuthStrategy
from totp_login.constants import GOOGLE_MAIL_URL, GOOGLE_SUCCESS_SELECTOR

# Set up logger for this module
logger = logging.getLogger(__name__)


class GoogleAuthStrategy(AuthStrategy):
    """Signs in to Gmail; the search box marks a finished sign-in."""

    @property
    def provider(self) -> AuthProvider:
        return AuthProvider.GOOGLE

    def get_start_url(self, request: LoginRequest) -> Optional[str]:
        return request.start_url or GOOGLE_MAIL_URL

    def get_target_selector(self, request: LoginRequest) -> str:
        return request.target_selector or GOOGLE_SUCCESS_SELECTOR
