"""Tests for BrowserSignal and the BrowserError family."""
from arc_devtools.errors import (
    BrowserConnectionError,
    BrowserError,
    BrowserSignal,
    ConfigurationError,
    ProfileConflictError,
)


def test_signal_values():
    assert BrowserSignal.CONFIGURATION.value == "configuration"
    assert BrowserSignal.CONNECTION.value == "connection"
    assert BrowserSignal.CONFLICT.value == "conflict"


def test_browser_error_default_message():
    err = BrowserError(BrowserSignal.CONNECTION)
    assert str(err) == "connection"


def test_configuration_error():
    err = ConfigurationError("Unsupported platform: Haiku")
    assert err.signal == BrowserSignal.CONFIGURATION
    assert str(err) == "Unsupported platform: Haiku"
    assert isinstance(err, BrowserError)


def test_connection_error_is_builtin_connection_error():
    err = BrowserConnectionError("no listener")
    assert isinstance(err, ConnectionError)
    assert isinstance(err, BrowserError)
    assert err.signal == BrowserSignal.CONNECTION
    assert str(err) == "no listener"


def test_profile_conflict_names_directory():
    err = ProfileConflictError("/tmp/profile")
    assert err.signal == BrowserSignal.CONFLICT
    assert err.user_data_dir == "/tmp/profile"
    assert "/tmp/profile" in str(err)
    assert "isolated" in str(err)
