"""telemetry: best-effort browser event logging."""
from .logger import BrowserEventLogger  # noqa: F401
