"""Configuration for the login automation."""

import os
from typing import List
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings:
    """Environment-driven defaults for the TOTP login flow."""

    # Browser connection (an already running browser, never launched here)
    browser_ws_endpoint: str = os.environ.get("BROWSER_WS_ENDPOINT", "")

    # Second-factor challenge loop
    challenge_count: int = int(os.environ.get("CHALLENGE_COUNT", "3"))
    challenge_timeout_seconds: float = float(
        os.environ.get("CHALLENGE_TIMEOUT_SECONDS", "30")
    )

    # Settle-wait loop
    trial_count: int = int(os.environ.get("TRIAL_COUNT", "10"))
    trial_timeout_seconds: float = float(os.environ.get("TRIAL_TIMEOUT_SECONDS", "2"))

    # Snapshots
    screenshot_mode: str = os.environ.get("SCREENSHOT_MODE", "off").lower()
    snapshot_kind: str = os.environ.get("SNAPSHOT_KIND", "image").lower()
    screenshot_prefix: str = os.environ.get("SCREENSHOT_PREFIX", "screenshot")

    # 2FA handler preferences
    twofa_handler_preferences: List[str] = os.environ.get(
        "TWOFA_HANDLER_PREFERENCES", "pyotp,manual"
    ).split(",")

    # Logging
    log_level: str = os.environ.get("LOG_LEVEL", "INFO")


# Global settings instance
settings = Settings()
