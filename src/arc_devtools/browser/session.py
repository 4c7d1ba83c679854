"""Browser acquisition: connect to a running Arc or launch a new one.

A :class:`BrowserManager` owns at most one live :class:`BrowserHandle` and
hands the same handle back for as long as it stays connected. There is no
lock around the cache: callers await one acquisition before starting the
next, otherwise two overlapping calls may both spawn a browser.
"""
import asyncio
import logging
import os

from playwright.async_api import Error as PlaywrightError, async_playwright

from ..config import LaunchConfig
from ..errors import BrowserConnectionError, ProfileConflictError
from ..telemetry.logger import BrowserEventLogger
from .chrome import build_launch_args, default_user_data_dir, resolve_executable_path
from .handle import BrowserHandle
from .targets import make_target_filter
from .window import resize_content

log = logging.getLogger(__name__)

_ALREADY_RUNNING = "The browser is already running"


async def launch_browser(playwright, config: LaunchConfig,
                         event_logger: BrowserEventLogger | None = None) -> BrowserHandle:
    """Spawn Arc for *config* and return a handle to it. No caching.

    Non-isolated launches without an explicit ``user_data_dir`` use the
    per-channel profile under ``~/.cache/arc-devtools-mcp``, created here.
    Isolated launches pass an empty profile path so Playwright creates a
    temporary one and removes it when the browser closes.

    If *event_logger* is given it is attached right after the spawn, so
    anything the browser emits while starting is missed.
    """
    user_data_dir = config.user_data_dir or ""
    if not config.isolated and not user_data_dir:
        user_data_dir = default_user_data_dir(config.resolved_channel)
        await asyncio.to_thread(os.makedirs, user_data_dir, exist_ok=True)

    args = build_launch_args(config)
    executable_path = resolve_executable_path(config.executable_path)

    log.info("Launching %s (profile: %s, headless: %s)",
             os.path.basename(executable_path),
             user_data_dir or "<temporary>", config.headless)
    try:
        context = await playwright.chromium.launch_persistent_context(
            user_data_dir,
            executable_path=executable_path,
            args=args,
            headless=config.headless,
            no_viewport=True,
            ignore_https_errors=config.accept_insecure_certs,
        )
    except PlaywrightError as e:
        if user_data_dir and _ALREADY_RUNNING in str(e):
            log.warning("Profile %s is locked by a running browser", user_data_dir)
            raise ProfileConflictError(user_data_dir) from e
        raise

    handle = BrowserHandle(context=context, target_filter=make_target_filter(config.devtools))
    try:
        if event_logger is not None:
            event_logger.attach(context)
        if config.viewport is not None:
            pages = context.pages
            if pages:
                await resize_content(pages[0], config.viewport.width, config.viewport.height)
    except BaseException:
        # the spawned browser would otherwise keep the profile locked
        try:
            await context.close()
        except Exception as e:
            log.warning(f"Failed to close browser after launch error: {e}")
        raise
    return handle


class BrowserManager:
    """Owns the Playwright driver and the single cached browser handle.

    Pass *playwright* to share an already started driver; otherwise one is
    started on first use and stopped by :meth:`close`.
    """

    def __init__(self, playwright=None):
        self._playwright = playwright
        self._owns_playwright = playwright is None
        self._handle: BrowserHandle | None = None
        self._event_logger: BrowserEventLogger | None = None

    @property
    def handle(self) -> BrowserHandle | None:
        return self._handle

    def _cached(self) -> BrowserHandle | None:
        if self._handle is not None and self._handle.connected:
            log.debug("Reusing connected browser handle")
            return self._handle
        return None

    async def _get_playwright(self):
        if self._playwright is None:
            self._playwright = await async_playwright().start()
        return self._playwright

    async def connect(self, browser_url: str, *, devtools: bool = False) -> BrowserHandle:
        """Attach to a browser already listening at *browser_url*.

        Uses the real window size; no viewport override is applied.
        """
        cached = self._cached()
        if cached is not None:
            return cached

        playwright = await self._get_playwright()
        log.info("Connecting to browser at %s", browser_url)
        try:
            browser = await playwright.chromium.connect_over_cdp(browser_url)
        except PlaywrightError as e:
            raise BrowserConnectionError(
                f"Could not connect to browser at {browser_url}: {e}"
            ) from e

        if self._event_logger is not None:
            self._event_logger.close()
            self._event_logger = None
        self._handle = BrowserHandle(browser=browser, target_filter=make_target_filter(devtools))
        log.info("Connected to browser at %s", browser_url)
        return self._handle

    async def launch(self, config: LaunchConfig) -> BrowserHandle:
        """Launch Arc for *config*, or return the connected handle from a previous call."""
        cached = self._cached()
        if cached is not None:
            return cached

        playwright = await self._get_playwright()
        event_logger = None
        if config.log_file is not None:
            event_logger = BrowserEventLogger(config.log_file)
        try:
            handle = await launch_browser(playwright, config, event_logger)
        except BaseException:
            if event_logger is not None:
                event_logger.close()
            raise

        if self._event_logger is not None:
            self._event_logger.close()
        self._event_logger = event_logger
        self._handle = handle
        log.info("Browser launched")
        return handle

    async def acquire(self, config: LaunchConfig) -> BrowserHandle:
        """Connect when ``config.browser_url`` is set, launch otherwise."""
        if config.browser_url:
            return await self.connect(config.browser_url, devtools=config.devtools)
        return await self.launch(config)

    async def close(self) -> None:
        """Release the cached handle and, if we started it, the driver."""
        if self._handle is not None:
            try:
                await self._handle.close()
            except Exception as e:
                log.warning(f"Failed to close browser cleanly: {e}")
            self._handle = None
        if self._event_logger is not None:
            self._event_logger.close()
            self._event_logger = None
        if self._owns_playwright and self._playwright is not None:
            try:
                await self._playwright.stop()
            except Exception as e:
                log.warning(f"Failed to stop Playwright cleanly: {e}")
            self._playwright = None
