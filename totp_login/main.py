"""Command-line runner: sign in on a page of an already running browser."""

import argparse
import asyncio
import json
import logging
import os
import sys
from typing import List, Optional

from playwright.async_api import Browser, Page, async_playwright

from .auth import AuthStrategyFactory
from .auth.twofa import TwoFAHandlerFactory, TwoFAHandlerType
from .config import settings
from .logging_config import configure_logging
from .models import AuthProvider, LoginRequest, LoginResponse

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="totp-login",
        description="Sign in on a browser page, answering TOTP challenges.",
    )
    parser.add_argument(
        "--provider",
        choices=[p.value for p in AuthProvider],
        default=AuthProvider.GOOGLE.value,
    )
    parser.add_argument(
        "--ws-endpoint",
        default=settings.browser_ws_endpoint,
        help="CDP endpoint of a running browser (default: BROWSER_WS_ENDPOINT)",
    )
    parser.add_argument("--email", default=os.environ.get("LOGIN_EMAIL", ""))
    parser.add_argument("--password", default=os.environ.get("LOGIN_PASSWORD", ""))
    parser.add_argument("--secret", default=os.environ.get("LOGIN_TOTP_SECRET", ""))
    parser.add_argument("--target", dest="target_selector", default=None)
    parser.add_argument("--url", dest="start_url", default=None)
    parser.add_argument(
        "--twofa",
        choices=[t.value for t in TwoFAHandlerFactory.get_available_handlers()],
        default=None,
        help="Code generator (default: TWOFA_HANDLER_PREFERENCES)",
    )
    parser.add_argument("--challenge-count", type=int)
    parser.add_argument("--challenge-timeout", dest="challenge_timeout_seconds", type=float)
    parser.add_argument("--trial-count", type=int)
    parser.add_argument("--trial-timeout", dest="trial_timeout_seconds", type=float)
    parser.add_argument("--screenshot-mode", choices=["off", "log", "file"])
    parser.add_argument("--snapshot-kind", choices=["image", "text"])
    parser.add_argument("--log-level", default=settings.log_level)
    return parser


def build_request(args: argparse.Namespace) -> LoginRequest:
    """Turn parsed arguments into a login request; unset options keep their defaults."""
    option_names = [
        "challenge_count",
        "challenge_timeout_seconds",
        "trial_count",
        "trial_timeout_seconds",
        "screenshot_mode",
        "snapshot_kind",
    ]
    options = {
        name: getattr(args, name)
        for name in option_names
        if getattr(args, name) is not None
    }

    missing = [name for name in ("email", "password", "secret") if not getattr(args, name)]
    if missing:
        raise ValueError(f"Missing required credentials: {', '.join(missing)}")

    return LoginRequest(
        provider=AuthProvider(args.provider),
        email=args.email,
        password=args.password,
        totp_secret=args.secret,
        target_selector=args.target_selector,
        start_url=args.start_url,
        options=options,
    )


def _first_page(browser: Browser) -> Optional[Page]:
    for context in browser.contexts:
        if context.pages:
            return context.pages[0]
    return None


async def run(request: LoginRequest, ws_endpoint: str, twofa: Optional[str] = None) -> LoginResponse:
    """Connect to the browser, sign in on its first page and return the result."""
    code_generator = (
        TwoFAHandlerFactory.create_handler(TwoFAHandlerType(twofa)) if twofa else None
    )
    strategy = AuthStrategyFactory.create_strategy(request.provider, code_generator)

    async with async_playwright() as p:
        logger.info(f"Connecting to remote browser: {ws_endpoint}")
        browser = await p.chromium.connect_over_cdp(ws_endpoint)
        page = _first_page(browser)
        if page is None:
            raise RuntimeError("The browser has no open page to sign in on")
        return await strategy.authenticate(page, request)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if not args.ws_endpoint:
        parser.error("a browser endpoint is required (--ws-endpoint or BROWSER_WS_ENDPOINT)")

    try:
        request = build_request(args)
    except ValueError as e:
        parser.error(str(e))

    try:
        response = asyncio.run(run(request, args.ws_endpoint, args.twofa))
    except Exception as e:
        logger.error(f"Could not sign in over {args.ws_endpoint}: {e}")
        return 1

    print(json.dumps(response.model_dump(mode="json"), indent=2))
    return 0 if response.success else 1


if __name__ == "__main__":
    sys.exit(main())
