"""Wait for the page to stop changing after a submission."""

import logging
from typing import Optional

from playwright.async_api import Page

from totp_login.logging_config import AuthLogger
from totp_login.models import ScreenshotMode, SnapshotKind, SnapshotWindow
from .snapshot import capture_snapshot, display_snapshot

logger = logging.getLogger(__name__)


async def wait_for_trial(
    page: Page,
    trial_count: int = 10,
    trial_timeout_seconds: float = 2,
    screenshot_mode: ScreenshotMode = ScreenshotMode.OFF,
    log: Optional[AuthLogger] = None,
    snapshot_kind: SnapshotKind = SnapshotKind.IMAGE,
    screenshot_prefix: str = "screenshot",
) -> SnapshotWindow:
    """Poll snapshots until two consecutive captures match or trials run out.

    The first capture happens immediately; every later one waits
    ``trial_timeout_seconds``. A failed capture still uses up a trial.
    """
    log = log or logger
    window = SnapshotWindow()

    attempt = -1
    while attempt < trial_count and not window.settled:
        if attempt > 0:
            log.warning(f"Changed on attempt {attempt}. Taking a screenshot...")
            await display_snapshot(page, screenshot_mode, log, screenshot_prefix)
        if attempt > -1:
            await page.wait_for_timeout(1000 * trial_timeout_seconds)

        snapshot = await capture_snapshot(page, snapshot_kind, log)
        if snapshot is not None:
            window.push(snapshot)
        attempt += 1

    return window
