"""Authentication strategy for any page using the standard field selectors."""

from totp_login.models import AuthProvider, LoginRequest
from totp_login.auth.base import AuthStrategy


class GenericAuthStrategy(AuthStrategy):
    """Uses the request's own success selector and start URL."""

    @property
    def provider(self) -> AuthProvider:
        return AuthProvider.GENERIC

    def get_target_selector(self, request: LoginRequest) -> str:
        if not request.target_selector:
            raise ValueError("target_selector is required for the generic provider")
        return request.target_selector
