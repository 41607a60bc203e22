from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import Any, List, Optional, Sequence, Tuple

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from totp_login.constants import CODE_SELECTOR, EMAIL_SELECTOR, PASSWORD_SELECTOR
from totp_login.models import AuthOptions

TARGET = "#inbox"


def pytest_configure(config: Any) -> None:
    config.addinivalue_line(
        "markers",
        "live: sign-in against a real account over CDP; needs credentials and a browser endpoint",
    )


class FakeElement:
    def __init__(self, selector: str) -> None:
        self.selector = selector

    def __repr__(self) -> str:
        return f"FakeElement({self.selector!r})"


class FakeKeyboard:
    def __init__(self, page: "FakePage") -> None:
        self.page = page

    async def press(self, key: str) -> None:
        self.page.calls.append(("press", key))
        self.page._submit()


class FakeLocator:
    def __init__(self, page: "FakePage", selector: str) -> None:
        self.page = page
        self.selector = selector

    async def press_sequentially(self, text: str, **kwargs: Any) -> None:
        self.page._type(self.selector, text)


class FakePage:
    """In-memory stand-in for a Playwright page behind a sign-in form.

    ``challenge`` decides whether a one-time code field shows up after the
    password. The page accepts the code once ``codes_needed`` codes have been
    submitted; ``None`` means it never does. ``frames`` feeds ``screenshot``:
    items are returned in order, the last one repeats, and exception
    instances are raised instead.
    """

    def __init__(
        self,
        target: str = TARGET,
        challenge: bool = True,
        codes_needed: Optional[int] = 1,
        frames: Sequence[Any] = (b"frame",),
        text: str = "Welcome",
        missing: Sequence[str] = (),
        final_lookup: Any = "auto",
        style_error: Optional[Exception] = None,
    ) -> None:
        self.target = target
        self.challenge = challenge
        self.codes_needed = codes_needed
        self.frames = list(frames)
        self.text = text
        self.missing = set(missing)
        self.final_lookup = final_lookup
        self.style_error = style_error

        self.url = "https://example.test/signin"
        self.keyboard = FakeKeyboard(self)
        self.calls: List[Tuple[Any, ...]] = []
        self.cancelled: List[str] = []
        self.values: dict = {}
        self.codes_submitted = 0
        self.goto_options: dict = {}
        self._last_typed: Optional[str] = None

    @property
    def signed_in(self) -> bool:
        if not self.challenge:
            return True
        return self.codes_needed is not None and self.codes_submitted >= self.codes_needed

    def _submit(self) -> None:
        if self._last_typed == CODE_SELECTOR:
            self.codes_submitted += 1
        self._last_typed = None

    async def _hang(self, selector: str) -> None:
        try:
            await asyncio.Event().wait()
        except asyncio.CancelledError:
            self.cancelled.append(selector)
            raise

    async def wait_for_selector(self, selector: str, **kwargs: Any) -> FakeElement:
        self.calls.append(("wait_for_selector", selector, kwargs))
        await asyncio.sleep(0)
        if selector in self.missing:
            raise PlaywrightTimeoutError(f"Timeout waiting for {selector}")
        if selector in (EMAIL_SELECTOR, PASSWORD_SELECTOR):
            return FakeElement(selector)
        if selector == self.target and not self.signed_in:
            await self._hang(selector)
        if selector == CODE_SELECTOR and self.signed_in:
            await self._hang(selector)
        return FakeElement(selector)

    def locator(self, selector: str) -> "FakeLocator":
        return FakeLocator(self, selector)

    def _type(self, selector: str, text: str) -> None:
        self.calls.append(("type", selector, text))
        self.values[selector] = self.values.get(selector, "") + text
        self._last_typed = selector

    async def evaluate(self, expression: str, arg: Any = None) -> None:
        self.calls.append(("evaluate", arg))
        if arg in self.values:
            self.values[arg] = ""

    async def query_selector(self, selector: str) -> Optional[FakeElement]:
        self.calls.append(("query_selector", selector))
        if self.final_lookup != "auto":
            return self.final_lookup
        if selector == self.target and self.signed_in:
            return FakeElement(selector)
        return None

    async def add_style_tag(self, **kwargs: Any) -> None:
        self.calls.append(("add_style_tag", kwargs.get("content")))
        if self.style_error is not None:
            raise self.style_error

    async def screenshot(self, **kwargs: Any) -> bytes:
        self.calls.append(("screenshot", kwargs.get("path")))
        if kwargs.get("path"):
            return b""
        frame = self.frames.pop(0) if len(self.frames) > 1 else self.frames[0]
        if isinstance(frame, Exception):
            raise frame
        return frame

    async def inner_text(self, selector: str, **kwargs: Any) -> str:
        self.calls.append(("inner_text", selector))
        return self.text

    async def wait_for_timeout(self, timeout: float) -> None:
        self.calls.append(("wait_for_timeout", timeout))

    async def goto(self, url: str, **kwargs: Any) -> None:
        self.calls.append(("goto", url))
        self.goto_options = kwargs
        self.url = url

    # Helpers for assertions

    def called(self, name: str) -> List[Tuple[Any, ...]]:
        return [call for call in self.calls if call[0] == name]

    def sleeps(self) -> List[float]:
        return [call[1] for call in self.called("wait_for_timeout")]

    def typed(self, selector: str) -> List[str]:
        return [call[2] for call in self.called("type") if call[1] == selector]

    def waits_for(self, selector: str) -> int:
        return sum(1 for call in self.called("wait_for_selector") if call[1] == selector)


class FakeCodeGenerator:
    def __init__(self) -> None:
        self.secrets: List[str] = []

    async def generate_code(self, secret: str) -> str:
        self.secrets.append(secret)
        return f"{100000 + len(self.secrets)}"

    def get_priority(self) -> int:
        return 0


class RecordingLogger:
    def __init__(self) -> None:
        self.records: List[Tuple[str, str]] = []

    def info(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        self.records.append(("info", str(msg)))

    def warning(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        self.records.append(("warning", str(msg)))

    def error(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        self.records.append(("error", str(msg)))

    def messages(self, level: str) -> List[str]:
        return [msg for lvl, msg in self.records if lvl == level]


@pytest.fixture
def codes() -> FakeCodeGenerator:
    return FakeCodeGenerator()


@pytest.fixture
def log() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def options() -> AuthOptions:
    return AuthOptions(
        challenge_count=3,
        challenge_timeout_seconds=30,
        trial_count=10,
        trial_timeout_seconds=2,
    )
