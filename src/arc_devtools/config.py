"""Typed launch configuration.

The host application validates user input and hands the acquisition layer
these frozen value objects; nothing here reads files or the environment.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import IO

TOOL_NAME = "arc-devtools-mcp"


class Channel(Enum):
    """Browser release track. Only used to pick a profile directory name."""
    STABLE = "stable"
    CANARY = "canary"
    BETA = "beta"
    DEV = "dev"


@dataclass(frozen=True)
class Viewport:
    width: int
    height: int

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Viewport dimensions must be positive, got {self.width}x{self.height}"
            )

    @classmethod
    def parse(cls, value: str) -> "Viewport":
        """Parse ``"1280x720"`` into a Viewport."""
        try:
            width, height = (int(part) for part in value.strip().split("x"))
        except (AttributeError, ValueError):
            raise ValueError("Invalid viewport. Expected format is `1280x720`.") from None
        if width <= 0 or height <= 0:
            raise ValueError("Invalid viewport. Expected format is `1280x720`.")
        return cls(width, height)


@dataclass(frozen=True)
class LaunchConfig:
    """Everything needed to connect to or launch one browser.

    ``log_file`` may be a filesystem path or an open text stream. It receives
    browser events (console messages, page errors, crashes, closes) recorded
    after launch, not the browser process's stdout/stderr.
    ``args`` are appended verbatim to the browser command line.
    """
    executable_path: str | None = None
    channel: Channel | None = None
    user_data_dir: str | None = None
    headless: bool = False
    isolated: bool = False
    args: tuple[str, ...] = field(default_factory=tuple)
    log_file: str | IO[str] | None = None
    viewport: Viewport | None = None
    devtools: bool = False
    accept_insecure_certs: bool = False
    proxy_server: str | None = None
    browser_url: str | None = None

    def __post_init__(self):
        # frozen: normalize through object.__setattr__
        if isinstance(self.channel, str):
            object.__setattr__(self, "channel", Channel(self.channel))
        if not isinstance(self.args, tuple):
            object.__setattr__(self, "args", tuple(self.args))

    @property
    def resolved_channel(self) -> Channel | None:
        """Channel after defaults: stable when nothing else picks the browser."""
        if self.channel is None and not self.browser_url and not self.executable_path:
            return Channel.STABLE
        return self.channel
