"""arc-devtools: launch or attach to an Arc browser for automation.

Provides a browser acquisition manager that reuses one live connection,
the target visibility policy applied to every connection, and typed launch
configuration.
"""
from .browser import BrowserHandle, BrowserManager, make_target_filter  # noqa: F401
from .config import Channel, LaunchConfig, Viewport  # noqa: F401
from .errors import (  # noqa: F401
    BrowserConnectionError,
    BrowserError,
    BrowserSignal,
    ConfigurationError,
    ProfileConflictError,
)
