"""Normalized errors for browser acquisition.

Every failure raised by the acquisition layer carries a ``BrowserSignal`` so
callers can branch on the kind of problem without parsing messages.
"""
from enum import Enum


class BrowserSignal(Enum):
    """What went wrong while acquiring a browser."""
    CONFIGURATION = "configuration"  # caller must fix input
    CONNECTION = "connection"        # remote debugging endpoint unreachable
    CONFLICT = "conflict"            # profile directory already in use


class BrowserError(Exception):
    """Exception carrying a normalized BrowserSignal."""

    def __init__(self, signal: BrowserSignal, message: str = ""):
        self.signal = signal
        super().__init__(message or signal.value)


class ConfigurationError(BrowserError):
    def __init__(self, message: str = ""):
        super().__init__(BrowserSignal.CONFIGURATION, message)


class BrowserConnectionError(BrowserError, ConnectionError):
    """Connecting to an existing browser failed. Also a builtin ConnectionError."""

    def __init__(self, message: str = ""):
        super().__init__(BrowserSignal.CONNECTION, message)


class ProfileConflictError(BrowserError):
    """Another browser instance already owns the user-data directory."""

    def __init__(self, user_data_dir: str):
        self.user_data_dir = user_data_dir
        super().__init__(
            BrowserSignal.CONFLICT,
            f"The browser is already running for {user_data_dir}. "
            "Use isolated mode to run multiple browser instances.",
        )
