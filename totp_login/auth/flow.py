"""Credential entry and TOTP challenge loop."""

import asyncio
import logging
from typing import Any, Awaitable, Dict, Optional

from playwright.async_api import ElementHandle, Page

from totp_login.constants import (
    CLEAR_FIELD_SCRIPT,
    CODE_SELECTOR,
    EMAIL_SELECTOR,
    PASSWORD_SELECTOR,
    SUBMIT_KEY,
    TARGET_WAIT_OPTIONS,
)
from totp_login.logging_config import AuthLogger
from totp_login.models import AuthOptions
from .settle import wait_for_trial
from .snapshot import display_snapshot
from .twofa import PyOTPHandler, TwoFAHandler

logger = logging.getLogger(__name__)


async def first_completed(*awaitables: Awaitable[Any]) -> Any:
    """Return the result of whichever awaitable succeeds first.

    The others are cancelled and awaited before returning. If every awaitable
    fails, the first failure is raised.
    """
    tasks = [asyncio.ensure_future(awaitable) for awaitable in awaitables]
    try:
        pending = set(tasks)
        first_error: Optional[BaseException] = None
        while pending:
            done, pending = await asyncio.wait(
                pending, return_when=asyncio.FIRST_COMPLETED
            )
            for task in tasks:
                if task not in done or task.cancelled():
                    continue
                error = task.exception()
                if error is None:
                    return task.result()
                if first_error is None:
                    first_error = error
        if first_error is None:
            raise asyncio.CancelledError()
        raise first_error
    finally:
        for task in tasks:
            if not task.done():
                task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)


async def _wait_for_target(
    page: Page, selector: str, wait_options: Dict[str, Any]
) -> bool:
    await page.wait_for_selector(selector, **wait_options)
    return True


async def _wait_for_challenge(page: Page) -> bool:
    await page.wait_for_selector(CODE_SELECTOR, state="visible")
    return False


async def race_for_target(
    page: Page, target_selector: str, wait_options: Optional[Dict[str, Any]] = None
) -> bool:
    """True if the target shows up before the one-time code field does."""
    if wait_options is None:
        wait_options = dict(TARGET_WAIT_OPTIONS)
    return await first_completed(
        _wait_for_target(page, target_selector, wait_options),
        _wait_for_challenge(page),
    )


async def authenticate(
    page: Page,
    email: str,
    password: str,
    secret: str,
    target_selector: str,
    options: Optional[AuthOptions] = None,
    log: Optional[AuthLogger] = None,
    code_generator: Optional[TwoFAHandler] = None,
) -> Optional[ElementHandle]:
    """Sign in on an already navigated page, answering TOTP challenges.

    Returns the element matching ``target_selector`` after the challenge loop,
    or None when it is not on the page. Running out of challenge attempts is
    not an error; failing to find the email or password field is.
    """
    options = options or AuthOptions.from_settings()
    log = log or logger
    code_generator = code_generator or PyOTPHandler()

    log.info("Waiting to enter the email...")
    await page.wait_for_selector(EMAIL_SELECTOR, state="visible")
    log.info("Entering the email...")
    await page.locator(EMAIL_SELECTOR).press_sequentially(email)
    await page.keyboard.press(SUBMIT_KEY)

    log.info("Waiting to enter the password...")
    await page.wait_for_selector(PASSWORD_SELECTOR, state="visible")
    log.info("Entering the password...")
    await page.locator(PASSWORD_SELECTOR).press_sequentially(password)
    await page.keyboard.press(SUBMIT_KEY)

    for attempt in range(options.challenge_count):
        if attempt > 0:
            log.warning(f"Challenged on attempt {attempt}. Entering the code...")
            await display_snapshot(
                page, options.screenshot_mode, log, options.screenshot_prefix
            )
            # The first retry follows detection directly
            if attempt > 1:
                await page.wait_for_timeout(1000 * options.challenge_timeout_seconds)

            code = await code_generator.generate_code(secret)
            await page.evaluate(CLEAR_FIELD_SCRIPT, CODE_SELECTOR)
            await page.locator(CODE_SELECTOR).press_sequentially(code)
            await page.keyboard.press(SUBMIT_KEY)

            await wait_for_trial(
                page,
                options.trial_count,
                options.trial_timeout_seconds,
                options.screenshot_mode,
                log,
                options.snapshot_kind,
                options.screenshot_prefix,
            )

        if await race_for_target(page, target_selector, options.target_wait_options):
            log.info(f"Found {target_selector} on attempt {attempt}")
            break

    # A fresh lookup, independent of the last race
    return await page.query_selector(target_selector)
