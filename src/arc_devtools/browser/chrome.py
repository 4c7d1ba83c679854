"""Arc executable discovery, profile directory layout, and launch arguments.

Pure planning helpers; nothing here spawns a process.
"""
import logging
import os
import platform

from ..config import Channel, LaunchConfig, TOOL_NAME
from ..errors import ConfigurationError

log = logging.getLogger(__name__)

# platform.system() -> default install location. "~" is expanded at lookup.
DEFAULT_EXECUTABLE_PATHS = {
    "Darwin": "/Applications/Arc.app/Contents/MacOS/Arc",
    "Windows": os.path.join("~", "AppData", "Local", "Arc", "Application", "Arc.exe"),
    "Linux": "/opt/Arc/arc",
}

HIDE_CRASH_RESTORE_FLAG = "--hide-crash-restore-bubble"
HEADLESS_SCREEN_INFO = "--screen-info={3840x2160}"
AUTO_OPEN_DEVTOOLS_FLAG = "--auto-open-devtools-for-tabs"


def resolve_executable_path(executable_path: str | None = None,
                            system: str | None = None) -> str:
    """Return *executable_path* or the platform's default Arc location.

    Raises ConfigurationError on a platform without a known default.
    """
    if executable_path:
        return executable_path
    system = system or platform.system()
    default = DEFAULT_EXECUTABLE_PATHS.get(system)
    if default is None:
        raise ConfigurationError(
            f"Unsupported platform: {system}. Please specify executable_path manually."
        )
    path = os.path.expanduser(default)
    log.debug("No executable_path given; using %s default %s", system, path)
    return path


def profile_dir_name(channel: Channel | str | None) -> str:
    if isinstance(channel, str):
        channel = Channel(channel)
    if channel is None or channel is Channel.STABLE:
        return "arc-profile"
    return f"arc-profile-{channel.value}"


def default_user_data_dir(channel: Channel | str | None, home: str = "") -> str:
    """``<home>/.cache/arc-devtools-mcp/<profile>`` for *channel*."""
    home = home or os.path.expanduser("~")
    return os.path.join(home, ".cache", TOOL_NAME, profile_dir_name(channel))


def build_launch_args(config: LaunchConfig) -> list[str]:
    """Assemble the browser command-line flags for *config*.

    Caller-supplied args come first; the session-restore bubble is always
    suppressed so automated runs start without a stray dialog.
    """
    args = list(config.args)
    if config.proxy_server:
        args.append(f"--proxy-server={config.proxy_server}")
    args.append(HIDE_CRASH_RESTORE_FLAG)
    if config.headless:
        args.append(HEADLESS_SCREEN_INFO)
    if config.devtools:
        args.append(AUTO_OPEN_DEVTOOLS_FLAG)
    return args
