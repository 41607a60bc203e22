"""Data models for the login flow."""

from enum import Enum
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, Field

from totp_login.config import settings
from totp_login.constants import TARGET_WAIT_OPTIONS


class AuthProvider(str, Enum):
    """Supported authentication providers."""

    GOOGLE = "google"
    GENERIC = "generic"


class ScreenshotMode(str, Enum):
    """How a snapshot is shown while the flow retries."""

    OFF = "off"
    LOG = "log"  # page text written to the logger
    FILE = "file"  # PNG written to the working directory


class SnapshotKind(str, Enum):
    """What a snapshot token is made from."""

    IMAGE = "image"  # base64 encoded PNG
    TEXT = "text"  # visible body text


class Snapshot(BaseModel):
    """Opaque capture of the page at one instant, compared only for equality."""

    model_config = {"frozen": True}

    kind: SnapshotKind
    data: str


class SnapshotWindow(BaseModel):
    """The last two successful snapshots; either slot may still be unset."""

    previous: Optional[Snapshot] = None
    current: Optional[Snapshot] = None

    def push(self, snapshot: Snapshot) -> None:
        self.previous = self.current
        self.current = snapshot

    @property
    def settled(self) -> bool:
        """True once two consecutive successful captures are equal."""
        return self.current is not None and self.previous == self.current


class AuthOptions(BaseModel):
    """Timing and retry options for a single authenticate call."""

    challenge_count: int = Field(default=3, ge=0)
    challenge_timeout_seconds: float = Field(default=30, ge=0)
    trial_count: int = Field(default=10, ge=0)
    trial_timeout_seconds: float = Field(default=2, ge=0)
    screenshot_mode: ScreenshotMode = ScreenshotMode.OFF
    snapshot_kind: SnapshotKind = SnapshotKind.IMAGE
    screenshot_prefix: str = "screenshot"

    # Passed through to the target selector wait only
    target_wait_options: Dict[str, Any] = Field(
        default_factory=lambda: dict(TARGET_WAIT_OPTIONS)
    )

    @classmethod
    def from_settings(cls) -> "AuthOptions":
        """Build options from the environment-driven settings."""
        return cls(
            challenge_count=settings.challenge_count,
            challenge_timeout_seconds=settings.challenge_timeout_seconds,
            trial_count=settings.trial_count,
            trial_timeout_seconds=settings.trial_timeout_seconds,
            screenshot_mode=settings.screenshot_mode,
            snapshot_kind=settings.snapshot_kind,
            screenshot_prefix=settings.screenshot_prefix,
        )

    def merged(self, overrides: Optional[Mapping[str, Any]] = None) -> "AuthOptions":
        """Return a validated copy with the given fields replaced."""
        if not overrides:
            return self.model_copy(deep=True)
        unknown = set(overrides) - set(type(self).model_fields)
        if unknown:
            raise ValueError(f"Unknown auth options: {', '.join(sorted(unknown))}")
        return type(self).model_validate({**self.model_dump(), **dict(overrides)})


class LoginRequest(BaseModel):
    """Login request for a provider strategy."""

    provider: AuthProvider = AuthProvider.GOOGLE
    email: str
    password: str
    totp_secret: str

    # Success marker and optional navigation for the generic provider
    target_selector: Optional[str] = None
    start_url: Optional[str] = None

    options: Dict[str, Any] = Field(default_factory=dict)


class LoginResponse(BaseModel):
    """Login response model."""

    success: bool
    message: str
    provider: AuthProvider
    execution_time_ms: float
    url: Optional[str] = None
