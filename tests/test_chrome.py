"""Tests for executable resolution, profile layout, and launch arguments."""
import os

import pytest

from arc_devtools.browser.chrome import (
    AUTO_OPEN_DEVTOOLS_FLAG,
    HEADLESS_SCREEN_INFO,
    HIDE_CRASH_RESTORE_FLAG,
    build_launch_args,
    default_user_data_dir,
    profile_dir_name,
    resolve_executable_path,
)
from arc_devtools.config import Channel, LaunchConfig
from arc_devtools.errors import BrowserSignal, ConfigurationError


def test_profile_dir_name_per_channel():
    assert profile_dir_name(None) == "arc-profile"
    assert profile_dir_name(Channel.STABLE) == "arc-profile"
    assert profile_dir_name("stable") == "arc-profile"
    assert profile_dir_name(Channel.CANARY) == "arc-profile-canary"
    assert profile_dir_name("beta") == "arc-profile-beta"
    assert profile_dir_name(Channel.DEV) == "arc-profile-dev"


def test_default_user_data_dir_layout():
    path = default_user_data_dir(Channel.CANARY, home="/home/u")
    assert path == os.path.join("/home/u", ".cache", "arc-devtools-mcp", "arc-profile-canary")


def test_default_user_data_dir_uses_home(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert default_user_data_dir(None) == os.path.join(
        str(tmp_path), ".cache", "arc-devtools-mcp", "arc-profile"
    )


def test_explicit_executable_wins():
    assert resolve_executable_path("/usr/bin/arc", system="Plan9") == "/usr/bin/arc"


def test_default_executable_per_platform():
    assert resolve_executable_path(system="Darwin") == "/Applications/Arc.app/Contents/MacOS/Arc"
    assert resolve_executable_path(system="Linux") == "/opt/Arc/arc"
    windows = resolve_executable_path(system="Windows")
    assert windows.endswith(os.path.join("AppData", "Local", "Arc", "Application", "Arc.exe"))
    assert not windows.startswith("~")


def test_unsupported_platform_raises():
    with pytest.raises(ConfigurationError) as exc_info:
        resolve_executable_path(system="FreeBSD")
    assert "FreeBSD" in str(exc_info.value)
    assert exc_info.value.signal == BrowserSignal.CONFIGURATION


def test_unsupported_platform_detected(monkeypatch):
    monkeypatch.setattr("arc_devtools.browser.chrome.platform.system", lambda: "SunOS")
    with pytest.raises(ConfigurationError, match="SunOS"):
        resolve_executable_path()


def test_args_always_hide_crash_bubble():
    args = build_launch_args(LaunchConfig(args=("--foo", "--bar=1")))
    assert args == ["--foo", "--bar=1", HIDE_CRASH_RESTORE_FLAG]


def test_headless_adds_screen_info():
    assert HEADLESS_SCREEN_INFO in build_launch_args(LaunchConfig(headless=True))
    assert HEADLESS_SCREEN_INFO not in build_launch_args(LaunchConfig(headless=False))


def test_devtools_adds_auto_open():
    assert AUTO_OPEN_DEVTOOLS_FLAG in build_launch_args(LaunchConfig(devtools=True))
    assert AUTO_OPEN_DEVTOOLS_FLAG not in build_launch_args(LaunchConfig())


def test_proxy_server_flag():
    args = build_launch_args(LaunchConfig(proxy_server="http://127.0.0.1:8080"))
    assert args[0] == "--proxy-server=http://127.0.0.1:8080"


def test_args_do_not_mutate_config():
    config = LaunchConfig(args=["--foo"], headless=True)
    build_launch_args(config)
    assert config.args == ("--foo",)
