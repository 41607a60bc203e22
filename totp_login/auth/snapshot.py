"""Page snapshots used to tell whether the page is still changing."""

import base64
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from playwright.async_api import Page

from totp_login.constants import CARET_STYLE
from totp_login.logging_config import AuthLogger
from totp_login.models import ScreenshotMode, Snapshot, SnapshotKind

logger = logging.getLogger(__name__)


async def capture_snapshot(
    page: Page,
    kind: SnapshotKind = SnapshotKind.IMAGE,
    log: Optional[AuthLogger] = None,
) -> Optional[Snapshot]:
    """Capture the page state, or return None if the page cannot be captured.

    Pages in the middle of a navigation routinely fail here, so failures are
    reported on the error channel and never raised.
    """
    log = log or logger
    try:
        await page.add_style_tag(content=CARET_STYLE)
        if kind == SnapshotKind.TEXT:
            data = await page.inner_text("body")
        else:
            image = await page.screenshot()
            data = base64.b64encode(image).decode("ascii")
        return Snapshot(kind=kind, data=data)
    except Exception as e:
        log.error(f"Could not capture a snapshot: {e}")
        return None


def screenshot_path(prefix: str, now: Optional[datetime] = None) -> Path:
    """Path in the working directory for a timestamped screenshot."""
    now = now or datetime.now(timezone.utc)
    return Path.cwd() / f"{prefix}-{now.strftime('%Y%m%dT%H%M%S%fZ')}.png"


async def display_snapshot(
    page: Page,
    mode: ScreenshotMode,
    log: Optional[AuthLogger] = None,
    prefix: str = "screenshot",
) -> None:
    """Show the current page according to the screenshot mode."""
    log = log or logger
    if mode == ScreenshotMode.OFF:
        return

    try:
        if mode == ScreenshotMode.LOG:
            text = await page.inner_text("body")
            log.info(f"Page text:\n{text}")
        elif mode == ScreenshotMode.FILE:
            path = screenshot_path(prefix)
            await page.screenshot(path=str(path))
            log.info(f"Saved a screenshot to {path}")
    except Exception as e:
        log.error(f"Could not take a screenshot: {e}")
